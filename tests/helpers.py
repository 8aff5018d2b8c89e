from planner.models import Task


def make_task(task_id, due_date, time="09:00", tag="other", title="", done=False):
    return Task(id=str(task_id), title=title or f"task {task_id}", due_date=due_date, time=time, tag=tag, done=done)
