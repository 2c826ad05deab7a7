"""Actor tools: get_actors, create_actor, update_actor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import default_actor
from ..safe_writer import SafeWriter
from ..schemas import CreateActorArguments, UpdateActorArguments
from .base import ToolResult, apply_updates, json_result, named

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from ..toolkit import Toolkit

ACTORS_FILE = "Actors.json"

_ACTOR_FIELDS = {
    "name": "name",
    "nickname": "nickname",
    "class_id": "classId",
    "initial_level": "initialLevel",
    "max_level": "maxLevel",
    "profile": "profile",
    "character_name": "characterName",
    "face_name": "faceName",
}


def register(toolkit: "Toolkit", writer: SafeWriter) -> None:
    @toolkit.tool("get_actors", "Get all actors (playable characters) from the database")
    def get_actors(arguments: object) -> ToolResult:
        actors = writer.read_collection(ACTORS_FILE)
        return json_result(
            [
                {
                    "id": actor.get("id"),
                    "name": actor.get("name", ""),
                    "nickname": actor.get("nickname", ""),
                    "classId": actor.get("classId"),
                    "initialLevel": actor.get("initialLevel"),
                    "maxLevel": actor.get("maxLevel"),
                }
                for actor in named(actors.populated())
            ]
        )

    @toolkit.tool("create_actor", "Create a new playable actor", CreateActorArguments)
    def create_actor(arguments: CreateActorArguments) -> ToolResult:
        actors = writer.read_collection(ACTORS_FILE)

        actor = default_actor()
        apply_updates(actor, arguments, _ACTOR_FIELDS)
        actor["characterIndex"] = arguments.character_index
        actor["faceIndex"] = arguments.face_index

        new_id = actors.append(actor)
        writer.write_collection(ACTORS_FILE, actors)
        return ToolResult(f'Created actor "{arguments.name}" with ID {new_id}')

    @toolkit.tool("update_actor", "Update an existing actor's properties", UpdateActorArguments)
    def update_actor(arguments: UpdateActorArguments) -> ToolResult:
        actors = writer.read_collection(ACTORS_FILE)
        actor = actors.require(arguments.id, kind="Actor")
        apply_updates(actor, arguments, _ACTOR_FIELDS)
        writer.write_collection(ACTORS_FILE, actors)
        return ToolResult(f'Updated actor "{actor.get("name", "")}" (ID {arguments.id})')
