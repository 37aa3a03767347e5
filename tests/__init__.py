"""
opzioni Test Suite Package.

Unit tests for the error taxonomy, format resolution and codecs, the file
gateway, the read/write locks, and the blocking and asyncio config handles.
"""
