"""Domain layer for jot: tasks, the task list, and command parsing."""
