"""Scanner, symbol table, semantic checks and dumps for the KPL teaching language."""

__version__ = "0.1.0"

__all__ = ["charcodes", "tokens", "errors", "reader", "scanner", "symtab", "semantics", "debug"]