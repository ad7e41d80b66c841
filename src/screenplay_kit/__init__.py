"""screenplay-kit - Screenplay pattern core for behaviour-driven tests."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("screenplay-kit")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"  # Fallback for editable installs without metadata

from .abilities import Abilities
from .actions import Action, ActivateAccount, CreateAccount, CreateProject, SignIn
from .actor import Actor
from .assertions import check_that
from .cast import DEFAULT_PERSONAS, Cast, persona_type
from .driver import DomainDriver, Project, has_project_named
from .errors import ConfigError, MissingAbilityError, ScreenplayError, UnknownActorError
from .questions import AuthenticationError, IsAuthenticated, ProjectsVisible, Question
from .tasks import SignUp, Task, task

__all__ = [
    "__version__",
    # Core
    "Abilities",
    "Actor",
    "Action",
    "Task",
    "task",
    "Question",
    "check_that",
    # Actions / tasks
    "CreateAccount",
    "ActivateAccount",
    "CreateProject",
    "SignIn",
    "SignUp",
    # Questions
    "ProjectsVisible",
    "IsAuthenticated",
    "AuthenticationError",
    # Cast
    "Cast",
    "DEFAULT_PERSONAS",
    "persona_type",
    # Driver
    "DomainDriver",
    "Project",
    "has_project_named",
    # Errors
    "ScreenplayError",
    "MissingAbilityError",
    "UnknownActorError",
    "ConfigError",
]
