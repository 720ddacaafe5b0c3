import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from aralchi.core.errors import UnknownCategoryError
from aralchi.db.session import get_session
from aralchi.models import Task
from aralchi.schemas.task import TaskCreate, TaskRead
from aralchi.services.categories import resolve_categories
from ..deps import parse_path_id, require_category_ids

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[TaskRead])
def list_tasks(session: Session = Depends(get_session)):
    tasks = session.exec(
        select(Task).options(selectinload(Task.categories)).order_by(Task.id)
    ).all()
    return [TaskRead.model_validate(task) for task in tasks]


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(task_create: TaskCreate, session: Session = Depends(get_session)):
    category_ids = require_category_ids(task_create.category_ids)

    # Nothing is written unless every category exists
    try:
        categories = resolve_categories(session, category_ids)
    except UnknownCategoryError as exc:
        logger.info("Task not created, unknown categories %s", exc.missing_ids)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Could not create the task. Check the category IDs.",
        )

    db_task = Task(title=task_create.title, categories=categories)
    session.add(db_task)
    session.commit()
    session.refresh(db_task)

    logger.info("Created task %s", db_task.id)
    return TaskRead.model_validate(db_task)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, session: Session = Depends(get_session)):
    parsed_id = parse_path_id(task_id)
    task = session.get(Task, parsed_id) if parsed_id is not None else None
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found.")

    # Join rows go with the task
    session.delete(task)
    session.commit()

    logger.info("Deleted task %s", parsed_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
