from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

from staffing.config import setup_logging
from staffing.db.database import SessionLocal
from staffing.db.directory import EmployeeDirectory
from staffing.matching.models import MatchResult, TaskDescriptor
from staffing.matching.selector import suggest_employees_for_task
from staffing.workflows.generator import generate_workflow_with_suggestions, refresh_suggestions
from staffing.workflows.models import InvalidRequestTypeError, WorkflowPlan

setup_logging()

app = FastAPI(
    title="staffing",
    description="Employee suggestions and workflow generation for client requests",
    version="0.1.0"
)


class GenerateWorkflowRequest(BaseModel):
    request_type: str
    description: str = ""
    requirements: str = ""


def get_directory() -> EmployeeDirectory:
    return EmployeeDirectory(SessionLocal)


@app.get("/")
async def root():
    """API root - shows available endpoints."""
    return {
        "service": "staffing",
        "version": "0.1.0",
        "docs": "/docs",
        "endpoints": {
            "suggestions": "/suggestions",
            "generate_workflow": "/workflows/generate",
            "refresh_workflow": "/workflows/refresh"
        }
    }


@app.post("/suggestions", response_model=list[MatchResult])
async def suggest_employees(task: TaskDescriptor, directory=Depends(get_directory)):
    """Top employee suggestions for a single task."""
    return await suggest_employees_for_task(task, directory)


@app.post("/workflows/generate", response_model=WorkflowPlan)
async def generate_workflow(body: GenerateWorkflowRequest, directory=Depends(get_directory)):
    """Expand a request type into a task breakdown with suggested employees."""
    try:
        return await generate_workflow_with_suggestions(
            body.request_type,
            body.description,
            body.requirements,
            directory
        )
    except InvalidRequestTypeError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/workflows/refresh", response_model=WorkflowPlan)
async def refresh_workflow(plan: WorkflowPlan, directory=Depends(get_directory)):
    """Recompute suggestions for an already generated workflow."""
    return await refresh_suggestions(plan, directory)
