"""
Tuplelog CLI - schema-inferring tuple store

Commands:
- tuplelog action - Submit an action
- tuplelog table header/min-len/info/infer - Table metadata
- tuplelog log show - Action log
- tuplelog replay - Rebuild a database and summarise it
"""

__version__ = "0.1.0"
