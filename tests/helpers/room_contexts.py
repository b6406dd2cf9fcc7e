"""Contexts that all pass; run by the ``ormassert check`` CLI tests."""

from ormassert import Context

from .models import Door, Room

a_room = Context("a Room", setup=Room)
a_room.topic.validates_presence_of("location")
a_room.topic.has_many("doors")
a_room.topic.has_one("floor_plan")
a_room.should_validate_presence_of("foo", "bar")

a_door = Context("a Door", setup=Door)
a_door.topic.belongs_to("room")
a_door.topic.validates_presence_of("room")
