"""entrylogger - personal tagged log with a sorted flat-file store."""
