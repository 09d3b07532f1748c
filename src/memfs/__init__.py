"""In-memory file manager.

Layout:
    memfs/
    ├── errors.py        # FileError kinds + InputStreamError
    ├── store.py         # FileEntry, StoreStats, FileStore
    ├── config.py        # MemfsConfig, load_config()
    ├── core.py          # Command table + Dispatcher loop
    └── connectors/      # Terminal protocol, stdio and scripted terminals

Nothing is written to disk; every file disappears when the process exits.
"""

__version__ = "0.1.0"
