"""To-do items, their text-file storage and an ordered list of them."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union


@dataclass
class Task:
    """One to-do item."""

    text: str
    done: bool = False


class TaskStore:
    """Tasks saved as a count line followed by one ``text flag`` line each.

    Spaces in the text are stored as underscores and read back as spaces.
    """

    def __init__(self, path: Union[str, os.PathLike] = "tasks.txt"):
        self.path = Path(path)

    def save(self, tasks: Iterable[Task]) -> None:
        tasks = list(tasks)
        lines = [str(len(tasks))]
        lines.extend(f"{task.text.replace(' ', '_')} {int(task.done)}" for task in tasks)
        self.path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    def load(self) -> list[Task]:
        """Read the saved tasks; a missing file means no tasks."""
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        tokens = content.split()
        if not tokens:
            return []
        try:
            count = int(tokens[0])
        except ValueError:
            raise ValueError(f"{self.path}: bad task count {tokens[0]!r}") from None
        fields = tokens[1:]
        if len(fields) < 2 * count:
            raise ValueError(f"{self.path}: expected {count} tasks")
        tasks = []
        for text, flag in zip(fields[0:2 * count:2], fields[1:2 * count:2]):
            if flag not in ("0", "1"):
                raise ValueError(f"{self.path}: bad done flag {flag!r}")
            tasks.append(Task(text.replace("_", " "), flag == "1"))
        return tasks

    def clear(self) -> None:
        """Delete the file if it exists."""
        self.path.unlink(missing_ok=True)


class TodoList:
    """Tasks in display order, newest first, saved after every change."""

    def __init__(self, store: TaskStore):
        self.store = store
        self.tasks: list[Task] = store.load()

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def _save(self) -> None:
        self.store.save(self.tasks)

    def add(self, text: str) -> Task:
        """Put a new task at the top."""
        task = Task(text)
        self.tasks.insert(0, task)
        self._save()
        return task

    def delete(self, index: int) -> Task:
        task = self.tasks.pop(self._check(index))
        self._save()
        return task

    def toggle(self, index: int) -> bool:
        """Flip a task's done state and return the new state."""
        task = self.tasks[self._check(index)]
        task.done = not task.done
        self._save()
        return task.done

    def swap(self, first: int, second: int) -> None:
        """Exchange two tasks in place (not saved by itself)."""
        a, b = self._check(first), self._check(second)
        self.tasks[a], self.tasks[b] = self.tasks[b], self.tasks[a]

    def move(self, index: Optional[int], offset: int, carry: bool = False) -> int:
        """Move the selection by ``offset`` and return the new selection.

        With no selection, select the first task when moving up and the last
        otherwise. When ``carry`` is set, the selected task travels along.
        A move past either end leaves everything unchanged.
        """
        if index is None:
            return 0 if offset == -1 else len(self.tasks) - 1
        new_index = index + offset
        if not 0 <= new_index < len(self.tasks):
            return index
        if carry:
            self.swap(index, new_index)
        self._save()
        return new_index

    def clear(self) -> None:
        """Drop every task and delete the saved file."""
        self.tasks.clear()
        self.store.clear()

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self.tasks):
            raise IndexError(f"no task at index {index}")
        return index