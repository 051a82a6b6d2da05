"""Terminal triage desk: patient register, service and priority queues, undo log and indexes."""

__version__ = "0.1.0"