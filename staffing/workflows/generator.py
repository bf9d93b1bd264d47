"""
Workflow generator.

Expands a request type into its template task breakdown and attaches
suggested employees to every task.
"""

import asyncio
import logging
from staffing.matching.models import TaskDescriptor
from staffing.matching.selector import suggest_employees_for_task
from staffing.workflows.models import TaskBreakdownEntry, WorkflowPlan
from staffing.workflows.templates import get_template

logger = logging.getLogger(__name__)


async def _with_suggestions(task: TaskDescriptor, directory) -> TaskBreakdownEntry:
    suggestions = await suggest_employees_for_task(task, directory)
    return TaskBreakdownEntry(
        **task.model_dump(exclude={"suggested_employees"}),
        suggested_employees=suggestions
    )


async def generate_workflow_with_suggestions(
    request_type: str,
    description: str,
    requirements: str,
    directory
) -> WorkflowPlan:
    """
    Generate a workflow plan for a client request.

    Template-based for now; `description` and `requirements` are accepted
    so a model-driven generator can replace the templates without changing
    callers.

    Args:
        request_type: One of the RequestType values
        description: Free-text request description (unused)
        requirements: Free-text requirements (unused)
        directory: Source of active employees and pending-task counts

    Returns:
        WorkflowPlan with tasks in template order

    Raises:
        InvalidRequestTypeError: If request_type has no template
    """
    template = get_template(request_type)
    logger.info(
        f"Generating workflow for {template.request_type.value} "
        f"({len(template.task_breakdown)} tasks)"
    )

    # gather() returns results in argument order, not completion order
    entries = await asyncio.gather(
        *(_with_suggestions(task.to_descriptor(), directory) for task in template.task_breakdown)
    )

    return WorkflowPlan(
        estimated_duration=template.estimated_duration,
        task_breakdown=list(entries)
    )


async def refresh_suggestions(plan: WorkflowPlan, directory) -> WorkflowPlan:
    """Recompute suggested employees for every task of an existing plan."""
    logger.info(f"Refreshing suggestions for {len(plan.task_breakdown)} tasks")
    entries = await asyncio.gather(
        *(_with_suggestions(entry, directory) for entry in plan.task_breakdown)
    )
    return plan.model_copy(update={"task_breakdown": list(entries)})
