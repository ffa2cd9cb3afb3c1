# By having it in __init__.py, we can use "from models import UserModel, ProjectModel"
from models.user import UserModel
from models.project import ProjectModel
from models.task import TaskModel
