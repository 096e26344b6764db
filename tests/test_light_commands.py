"""
Tests for LightOnCommand / LightOffCommand
"""
import pytest

from pattern_playground.behavioral.command import (
    BaseCommand,
    LightOffCommand,
    LightOnCommand,
)


class TestConstruction:

    def test_construction_does_not_touch_light(self, light):
        LightOnCommand(light)
        assert light.is_on is False

        light.on()
        LightOffCommand(light)
        assert light.is_on is True

    def test_description_uses_light_name(self, light):
        assert LightOnCommand(light).description == "Turn on Living room"
        assert LightOffCommand(light).description == "Turn off Living room"

    def test_base_command_is_abstract(self):
        with pytest.raises(TypeError):
            BaseCommand()


class TestExecuteUndo:

    def test_on_command(self, light):
        command = LightOnCommand(light)
        command.execute()
        assert light.is_on is True
        command.undo()
        assert light.is_on is False

    def test_off_command(self, light):
        light.on()
        command = LightOffCommand(light)
        command.execute()
        assert light.is_on is False
        command.undo()
        assert light.is_on is True

    def test_redundant_on_undo_keeps_light_on(self, light):
        light.on()
        command = LightOnCommand(light)
        command.execute()
        command.undo()
        assert light.is_on is True

    def test_redundant_off_undo_keeps_light_off(self, light):
        command = LightOffCommand(light)
        command.execute()
        command.undo()
        assert light.is_on is False

    def test_undo_without_execute_applies_inverse(self, light):
        LightOffCommand(light).undo()
        assert light.is_on is True
        LightOnCommand(light).undo()
        assert light.is_on is False

    def test_each_execution_undone_separately(self, light):
        command = LightOnCommand(light)
        command.execute()
        command.execute()

        command.undo()
        assert light.is_on is True
        command.undo()
        assert light.is_on is False

    def test_redo_executes_again(self, light):
        command = LightOnCommand(light)
        command.execute()
        command.undo()
        command.redo()
        assert light.is_on is True
