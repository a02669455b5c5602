"""Infrastructure layer — graph file loading and the graph engine.

This layer depends on stdlib, the domain model, and third-party libs (NetworkX).
It must never import from services, commands, or output.
The service layer bridges between the domain algorithms and infrastructure.
"""
