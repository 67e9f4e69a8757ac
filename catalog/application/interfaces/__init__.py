"""Application interfaces (ports).

Define contracts for infrastructure implementations (DIP).
No runtime imports from catalog.infrastructure.
"""

from catalog.application.interfaces.node_store import INodeStore

__all__ = ["INodeStore"]
