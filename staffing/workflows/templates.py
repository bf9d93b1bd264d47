"""
Workflow templates per request type.

The catalog is fixed: one template for every RequestType, built once at
import time and exposed read-only.
"""

from types import MappingProxyType
from staffing.workflows.models import (
    InvalidRequestTypeError,
    RequestType,
    TaskTemplate,
    WorkflowTemplate,
)


_REQUIREMENTS_PLANNING = "Requirements Analysis & Planning"
_BACKEND_SKILLS = ("Node.js", "Express", "MongoDB", "REST API")


_CATALOG = {
    RequestType.WEB_DEV: WorkflowTemplate(
        request_type=RequestType.WEB_DEV,
        estimated_duration=320,
        task_breakdown=(
            TaskTemplate(
                task_name=_REQUIREMENTS_PLANNING,
                team="research",
                estimated_hours=40,
                required_skills=("Business Analysis", "User Research", "Documentation"),
            ),
            TaskTemplate(
                task_name="UI/UX Design",
                team="design",
                estimated_hours=60,
                required_skills=("Figma", "UI/UX", "Web Design", "Wireframing"),
            ),
            TaskTemplate(
                task_name="Frontend Development",
                team="development",
                estimated_hours=120,
                required_skills=("React", "JavaScript", "HTML", "CSS", "TypeScript"),
            ),
            TaskTemplate(
                task_name="Backend Development",
                team="development",
                estimated_hours=80,
                required_skills=_BACKEND_SKILLS,
            ),
            TaskTemplate(
                task_name="Testing & QA",
                team="testing",
                estimated_hours=20,
                required_skills=("Testing", "QA", "Jest", "Debugging"),
            ),
        ),
    ),
    RequestType.APP_DEV: WorkflowTemplate(
        request_type=RequestType.APP_DEV,
        estimated_duration=400,
        task_breakdown=(
            TaskTemplate(
                task_name=_REQUIREMENTS_PLANNING,
                team="research",
                estimated_hours=50,
                required_skills=("Business Analysis", "User Research", "Mobile Strategy"),
            ),
            TaskTemplate(
                task_name="UI/UX Design",
                team="design",
                estimated_hours=80,
                required_skills=("Figma", "UI/UX", "Mobile Design", "Prototyping"),
            ),
            TaskTemplate(
                task_name="Mobile App Development",
                team="development",
                estimated_hours=180,
                required_skills=("React Native", "Mobile Development", "JavaScript", "TypeScript"),
            ),
            TaskTemplate(
                task_name="Backend API Development",
                team="development",
                estimated_hours=70,
                required_skills=_BACKEND_SKILLS,
            ),
            TaskTemplate(
                task_name="Testing & QA",
                team="testing",
                estimated_hours=20,
                required_skills=("Mobile Testing", "QA", "Debugging"),
            ),
        ),
    ),
    RequestType.PROTOTYPE: WorkflowTemplate(
        request_type=RequestType.PROTOTYPE,
        estimated_duration=120,
        task_breakdown=(
            TaskTemplate(
                task_name="Requirement Gathering",
                team="research",
                estimated_hours=20,
                required_skills=("User Research", "Requirements Analysis"),
            ),
            TaskTemplate(
                task_name="Prototype Design",
                team="design",
                estimated_hours=60,
                required_skills=("Figma", "Prototyping", "UI/UX", "Wireframing"),
            ),
            TaskTemplate(
                task_name="Interactive Prototype Development",
                team="development",
                estimated_hours=40,
                required_skills=("JavaScript", "Prototyping", "Frontend"),
            ),
        ),
    ),
    RequestType.RESEARCH: WorkflowTemplate(
        request_type=RequestType.RESEARCH,
        estimated_duration=80,
        task_breakdown=(
            TaskTemplate(
                task_name="Research & Analysis",
                team="research",
                estimated_hours=80,
                required_skills=("Research", "Analysis", "Documentation"),
            ),
        ),
    ),
}

def check_catalog(catalog) -> None:
    """Raise RuntimeError unless every request type has a template."""
    missing = sorted(t.value for t in RequestType if t not in catalog)
    if missing:
        raise RuntimeError(f"workflow catalog is missing request types: {missing}")


check_catalog(_CATALOG)

TEMPLATES = MappingProxyType(_CATALOG)


def get_template(request_type) -> WorkflowTemplate:
    """Look up the template for a request type (enum member or its string value)."""
    try:
        key = RequestType(request_type)
    except ValueError:
        raise InvalidRequestTypeError(request_type) from None
    return TEMPLATES[key]
