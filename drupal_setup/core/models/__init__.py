"""
Domain models — Pydantic types for the installer.

All models are re-exported here for convenient access:

    from drupal_setup.core.models import Action, Receipt, StepResult, DrupalProject
"""

from drupal_setup.core.models.action import Action, Receipt
from drupal_setup.core.models.config import ContentSettings, InstallerConfig
from drupal_setup.core.models.project import (
    DrupalProject,
    ProjectNameError,
    normalize_project_name,
)
from drupal_setup.core.models.step import Provider, Reporter, StepResult

__all__ = [
    # action.py
    "Action",
    "Receipt",
    # config.py
    "ContentSettings",
    "InstallerConfig",
    # project.py
    "DrupalProject",
    "ProjectNameError",
    "normalize_project_name",
    # step.py
    "Provider",
    "Reporter",
    "StepResult",
]
