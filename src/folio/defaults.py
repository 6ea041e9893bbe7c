"""Demo records written when a collection file is first read."""

from __future__ import annotations

DEFAULT_PROJECTS: list[dict] = [
    {
        "id": 1,
        "title": "3D Chair Modelling",
        "description": "A mathematical chair, modelled in Blender.",
        "longDescription": (
            "This project shows the modelling of a mathematical chair in Blender with a focus "
            "on geometric precision and aesthetic design. The chair was built with subdivision "
            "surface techniques to get a smooth and realistic result."
        ),
        "image": "/project1.jpg",
        "technologies": ["Blender", "3D modelling", "Subdivision Surface"],
        "category": "3D design",
        "completed": True,
        "modelPath": "/models/chair.glb",
        "team": ["Jano Offermann"],
        "timeline": "January 2023 - March 2023",
        "github": "https://github.com/example/blender-chair-model",
    },
    {
        "id": 2,
        "title": "Interactive Website",
        "description": "A responsive website built with modern web technologies.",
        "longDescription": (
            "This project demonstrates building a modern, responsive website with HTML5, CSS3 "
            "and JavaScript. The site contains interactive elements and animations."
        ),
        "image": "/project2.jpg",
        "technologies": ["HTML5", "CSS3", "JavaScript", "Responsive Design"],
        "category": "Web development",
        "completed": True,
        "modelPath": "",
        "team": ["Jano Offermann", "Lisa Schmidt"],
        "timeline": "April 2023 - June 2023",
        "github": "https://github.com/example/interactive-website",
    },
]

DEFAULT_TEAM: list[dict] = [
    {
        "id": "1",
        "name": "Max",
        "surname": "Mustermann",
        "project": "3D Modelling",
        "projectId": "1",
        "profileImage": "/team/default-avatar.png",
        "specializations": ["Mathematics", "Development"],
    },
    {
        "id": "2",
        "name": "Anna",
        "surname": "Beispiel",
        "project": "Interactive Website",
        "projectId": "2",
        "profileImage": "/team/default-avatar.png",
        "specializations": ["Web design", "UI/UX"],
    },
    {
        "id": "3",
        "name": "Lisa",
        "surname": "Musterfrau",
        "project": "AI-controlled Robot",
        "projectId": "3",
        "profileImage": "/team/default-avatar.png",
        "specializations": ["Artificial intelligence", "Data analysis"],
    },
]

DEFAULT_ACTIVITIES: list[dict] = [
    {
        "id": 1,
        "type": "project",
        "action": "update",
        "text": "Project '3D Chair Modelling' updated",
        "timestamp": "2023-10-15T15:45:00.000Z",
    },
    {
        "id": 2,
        "type": "project",
        "action": "upload",
        "text": "New model uploaded: chair.glb",
        "timestamp": "2023-10-14T10:23:00.000Z",
    },
    {
        "id": 3,
        "type": "project",
        "action": "edit",
        "text": "Project 'Interactive Website' edited",
        "timestamp": "2023-03-19T11:30:00.000Z",
    },
]
