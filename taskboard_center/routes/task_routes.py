import re
from typing import List, Optional

from flask import Blueprint, current_app, redirect, render_template, request, url_for

from taskboard_core.models import Outcome
from taskboard_core.validator import TaskForm, validate_task

tasks_bp = Blueprint("tasks", __name__)

# Largest rowid SQLite can bind; anything bigger is treated as malformed.
_MAX_TASK_ID = 2 ** 63 - 1

# Plain base-10 with ASCII digits; int() alone also takes "1_0" and fullwidth digits.
_TASK_ID_PATTERN = re.compile(r"-?[0-9]+")


def _parse_task_id(raw: str) -> Optional[int]:
    if not _TASK_ID_PATTERN.fullmatch(raw):
        return None
    task_id = int(raw)
    if abs(task_id) > _MAX_TASK_ID:
        return None
    return task_id


def _list_url(outcome: Optional[Outcome] = None) -> str:
    if outcome is None:
        return url_for("tasks.list_tasks")
    return url_for("tasks.list_tasks", ok=outcome.value)


def _render_index(message: Optional[str] = None, errors: Optional[List[str]] = None,
                  form: Optional[TaskForm] = None, editing_id: Optional[int] = None):
    tasks = current_app.task_store.list_tasks()
    if editing_id is not None and all(task.id != editing_id for task in tasks):
        # No row to hold the edit form; keep the input in the create form instead
        editing_id = None
    return render_template("index.html",
                           tasks=tasks,
                           message=message,
                           errors=errors,
                           form=form,
                           editing_id=editing_id)


@tasks_bp.route("/tasks", methods=["GET"])
def list_tasks():
    outcome = Outcome.from_code(request.args.get("ok"))
    return _render_index(message=outcome.message if outcome else None)


@tasks_bp.route("/tasks", methods=["POST"])
def create_task():
    form = TaskForm.from_mapping(request.form)
    errors = validate_task(form)
    if errors:
        return _render_index(errors=errors, form=form), 400

    current_app.task_store.create_task(form.title, form.description, form.due_date_or_none())
    return redirect(_list_url(Outcome.CREATED))


@tasks_bp.route("/tasks/<task_id>/complete", methods=["POST"])
def complete_task(task_id):
    parsed = _parse_task_id(task_id)
    if parsed is None:
        return redirect(_list_url())
    current_app.task_store.set_completed(parsed, True)
    return redirect(_list_url(Outcome.COMPLETED))


@tasks_bp.route("/tasks/<task_id>/uncomplete", methods=["POST"])
def uncomplete_task(task_id):
    parsed = _parse_task_id(task_id)
    if parsed is None:
        return redirect(_list_url())
    current_app.task_store.set_completed(parsed, False)
    return redirect(_list_url(Outcome.REOPENED))


@tasks_bp.route("/tasks/<task_id>/edit", methods=["POST"])
def edit_task(task_id):
    parsed = _parse_task_id(task_id)
    if parsed is None:
        return redirect(_list_url())

    form = TaskForm.from_mapping(request.form)
    errors = validate_task(form)
    if errors:
        return _render_index(errors=errors, form=form, editing_id=parsed), 400

    # A missing id updates zero rows and still reports success.
    current_app.task_store.update_task(parsed, form.title, form.description, form.due_date_or_none())
    return redirect(_list_url(Outcome.UPDATED))


@tasks_bp.route("/tasks/<task_id>/delete", methods=["POST"])
def delete_task(task_id):
    parsed = _parse_task_id(task_id)
    if parsed is None:
        return redirect(_list_url())
    current_app.task_store.delete_task(parsed)
    return redirect(_list_url(Outcome.DELETED))
