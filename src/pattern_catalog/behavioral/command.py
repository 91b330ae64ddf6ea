"""Command: turn a request into a stand-alone object.

Problem:
    A remote control has buttons that switch a light on and off, and users
    want to undo what they pressed. If the buttons call the light directly,
    there is nothing to remember and nothing to reverse.

Solution:
    Each action is a command object with ``execute`` and ``undo``. The
    invoker (``RemoteControl``) runs commands and keeps them on an undo
    stack; undoing moves a command to a redo stack, and running a new
    command clears the redo history. The receiver (``Light``) does the real
    work and knows nothing about commands.

Use cases:
    1. Operations should be parametrized, queued, scheduled or sent over
       the network as objects.
    2. Operations must be reversible.

Pros:
    1. Single Responsibility Principle: invokers are decoupled from the
       classes that perform the operations.
    2. Open/Closed Principle: new commands do not break existing code.
    3. Undo and redo come naturally.
    4. Simple commands can be assembled into complex ones.

Cons:
    1. An extra layer between senders and receivers makes the code more
       complicated.
"""
from abc import ABC, abstractmethod
from typing import List


class Light:
    """Receiver."""

    def __init__(self) -> None:
        self.is_on = False

    def turn_on(self) -> None:
        self.is_on = True
        print("The light is ON")

    def turn_off(self) -> None:
        self.is_on = False
        print("The light is OFF")


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        pass

    @abstractmethod
    def undo(self) -> None:
        pass


class LightOnCommand(Command):
    def __init__(self, light: Light):
        self.light = light

    def execute(self) -> None:
        self.light.turn_on()

    def undo(self) -> None:
        self.light.turn_off()


class LightOffCommand(Command):
    def __init__(self, light: Light):
        self.light = light

    def execute(self) -> None:
        self.light.turn_off()

    def undo(self) -> None:
        self.light.turn_on()


class RemoteControl:
    """Invoker with undo and redo history."""

    def __init__(self) -> None:
        self._undo_stack: List[Command] = []
        self._redo_stack: List[Command] = []

    def execute_command(self, command: Command) -> None:
        command.execute()
        self._undo_stack.append(command)
        self._redo_stack.clear()

    def undo(self) -> bool:
        """Undo the most recent command. Returns False when there is none."""
        if not self._undo_stack:
            print("Nothing to undo!")
            return False
        command = self._undo_stack.pop()
        command.undo()
        self._redo_stack.append(command)
        return True

    def redo(self) -> bool:
        """Re-execute the most recently undone command. Returns False when there is none."""
        if not self._redo_stack:
            print("Nothing to redo!")
            return False
        command = self._redo_stack.pop()
        command.execute()
        self._undo_stack.append(command)
        return True


def main() -> None:
    """Switch a light on and off, then undo past the start of history."""
    light = Light()
    remote = RemoteControl()

    remote.execute_command(LightOnCommand(light))
    remote.execute_command(LightOffCommand(light))

    remote.undo()
    remote.undo()
    remote.undo()


if __name__ == "__main__":
    main()
