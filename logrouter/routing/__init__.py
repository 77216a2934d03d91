"""logrouter event routing — delivers tagged, leveled messages to sinks.

Producers dispatch under a category; the LogRegistry delivers to every
sink subscribed to that category, or, when there are none, to every sink
registered under the ``"*"`` wildcard.  Sinks are pluggable targets
implementing the BaseSink protocol: local files, the console, in-memory
buffers, or anything custom.
"""
