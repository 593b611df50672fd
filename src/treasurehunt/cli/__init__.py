"""
treasurehunt.cli — Click-based CLI entry point and operation handlers.

Operations:
    --add               Interactively add a treasure (creates the hunt)
    --list              Show hunt file metadata and every treasure
    --view              Show one treasure in full
    --remove_treasure   Delete one treasure
    --remove_hunt       Delete a hunt with its log and symlink
    --log               Show recent audit log entries
"""
