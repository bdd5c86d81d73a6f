# SPDX-License-Identifier: MIT

from eyehabit.model.task import Task, TaskIcon


def get_task_template() -> Task:
    return {
        "id": "",
        "title": "",
        "description": "",
        "icon": TaskIcon.EYE,
        "duration": 10,
        "targetCount": 1,
        "frequency": "daily",
        "videoUrl": None,
    }


def get_default_tasks() -> list[Task]:
    return [
        {
            "id": "outdoor",
            "title": "Outdoor daylight",
            "description": "Spend two hours outdoors in natural light every day.",
            "icon": TaskIcon.SUN,
            "duration": 120,
            "targetCount": 1,
            "frequency": "daily",
            "videoUrl": None,
        },
        {
            "id": "distant",
            "title": "Distance gazing",
            "description": "Look at something 20 feet (about 6 meters) away to relax focus.",
            "icon": TaskIcon.EYE,
            "duration": 10,
            "targetCount": 3,
            "frequency": "daily",
            "videoUrl": None,
        },
    ]
