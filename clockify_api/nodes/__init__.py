from clockify_api.nodes.client import ClientNode
from clockify_api.nodes.project import ProjectNode
from clockify_api.nodes.task import TaskNode
from clockify_api.nodes.workspace import WorkspaceNode

__all__ = ["WorkspaceNode", "ClientNode", "ProjectNode", "TaskNode"]
