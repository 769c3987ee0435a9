"""queryhl — tokenizer and HTML highlighter for boolean key=value queries."""

__version__ = "0.1.0"
