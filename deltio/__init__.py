"""In-process Pub/Sub style topics, pulled-message tracking and flow control for local testing."""

__version__ = "0.6.0"

__all__ = [
    "ack",
    "errors",
    "flow_control",
    "message",
    "names",
    "outstanding",
    "pulled",
    "retry_queue",
    "stats",
    "topics",
    "tracing",
]