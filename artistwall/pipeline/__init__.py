"""Wall orchestration and runtime state.

    - session: per-load state, reset on every user switch
    - reveal_engine: UI-free tile state machine
    - rotation_controller: ping-pong auto-rotation across loaded sources
    - wall_events: observer hub feeding the presentation layer
    - orchestrator: wires the services together for one wall
"""

from artistwall.pipeline.orchestrator import ArtistWallOrchestrator
from artistwall.pipeline.reveal_engine import RevealEngine
from artistwall.pipeline.rotation_controller import AutoRotationController, next_rotation_step
from artistwall.pipeline.session import WallSession
from artistwall.pipeline.wall_events import WallEvent, WallEventBroadcaster, WallEventType

__all__ = [
    "ArtistWallOrchestrator",
    "AutoRotationController",
    "RevealEngine",
    "WallEvent",
    "WallEventBroadcaster",
    "WallEventType",
    "WallSession",
    "next_rotation_step",
]
