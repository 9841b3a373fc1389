"""Small command-line utilities: AVL tree, Unicode charts, ANSI colours, GPT, Intel HEX, PNG plots, GBK, file sizes, locale."""

__version__ = "0.1.0"