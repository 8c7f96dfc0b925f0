from .edge_waiter import IEdgeWaiter, PollEdgeWaiter, Wakeup
from .edge_waiter_mock import ScriptedEdgeWaiter

__all__ = [
    "IEdgeWaiter",
    "PollEdgeWaiter",
    "Wakeup",
    "ScriptedEdgeWaiter",
]
