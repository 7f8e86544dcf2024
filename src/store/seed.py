"""Demo tasks a fresh store starts with."""

from typing import List

from models import Task


def default_tasks() -> List[Task]:
    return [
        Task(
            id="1",
            description="Сделать финальное задание темы REST API",
            note="Если сегодня сделаю, то завтра будет свободный день. Ура!",
            applications=["VS Code", "Terminal", "git"],
        ),
        Task(
            id="2",
            description="Протестировать финальное задание с помощью Postmen",
            note=(
                "Лучше это делать в процессе разработки, каждый раз, "
                "когда запускаешь сервер и проверяешь хендлер"
            ),
            applications=["VS Code", "Terminal", "git", "Postman"],
        ),
    ]
