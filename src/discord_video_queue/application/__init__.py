"""
Application Layer

Orchestrates domain objects and infrastructure to fulfil use cases.

Structure:
- interfaces/: Port interfaces for infrastructure adapters
- services/: Queue store, playback controller and the command-facing service
"""
