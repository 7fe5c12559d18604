"""Errors raised by the ranking pipeline and its collaborators."""


class RetrievalError(Exception):
    """
    The candidate lookup failed (RPC error, timeout, bad payload).

    Fatal for the request: the pipeline aborts and no partial feed is produced.
    """
