"""querybridge - relay a query to a web-search or chat-completion provider"""

__version__ = "1.0.0"
