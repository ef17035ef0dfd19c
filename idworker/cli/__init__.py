from .root import idworker as idworker, run as run
