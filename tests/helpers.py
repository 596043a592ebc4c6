"""Shared fixtures for building small reference corpora."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List

from truthcheck_backend.models import TruthPost


def make_post(post_id: str, content: str, **overrides) -> TruthPost:
    data = {
        "id": post_id,
        "created_at": "2024-11-06T03:12:00.000Z",
        "content": content,
        "url": f"https://truthsocial.com/@realDonaldTrump/{post_id}",
        "media": [],
        "replies_count": 10,
        "reblogs_count": 20,
        "favourites_count": 30,
    }
    data.update(overrides)
    return TruthPost(**data)


def make_posts(contents: Iterable[str]) -> List[TruthPost]:
    return [make_post(str(position + 1), content) for position, content in enumerate(contents)]


def write_corpus(directory: Path, posts: Iterable[TruthPost], name: str = "trump.json") -> Path:
    path = Path(directory) / name
    payload = [post.model_dump() for post in posts]
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
