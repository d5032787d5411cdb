"""plaintodo core library — todo lists stored as plain text files.

Public API re-exports for convenient imports:
    from plaintodo import Shell, ListRegistry, ListSession, next_token, ...
"""

# Workspace & settings
from plaintodo.workspace import (
    workspace_root,
    Settings,
    load_settings,
    config_path,
    lists_dir,
    index_path,
    list_path,
    list_name,
)

# File access
from plaintodo.fileio import (
    file_size,
    create_file,
    delete_file,
    rename_file,
    copy_file,
    move_file,
    write_file,
    read_text,
    read_lines,
    write_binary,
    read_binary,
    create_backup,
    compare_files,
)

# Models
from plaintodo.models import Entry, TodoList

# Command handling
from plaintodo.tokenizer import next_token
from plaintodo.console import Console
from plaintodo.registry import ListRegistry
from plaintodo.session import ListSession, LIST_COMMANDS
from plaintodo.shell import Shell, MENU_COMMANDS
from plaintodo.signals import install_interrupt_handler
