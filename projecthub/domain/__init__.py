"""
Domain model: users own projects, projects own tasks
"""
from .entities import Project, Session, Task, User, new_id
from .enums import ProjectStatus, TaskPriority, TaskStatus

__all__ = [
    'User',
    'Project',
    'Task',
    'Session',
    'ProjectStatus',
    'TaskStatus',
    'TaskPriority',
    'new_id',
]
