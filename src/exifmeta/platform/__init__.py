"""Platform adapters: logging and external process execution."""
