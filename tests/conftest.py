from __future__ import annotations

import pytest

SHALOM = """## Шалом
[Куплет]
Я вам ударом снёс пол-оскала
По мне судят рэп, как оперу по Ла Скала
Твоя мамаша себе точно горло полоскала
После того, как она меня поласкала
"""

SHALOM_SPLIT = """## Шалом
[Куплет]
Я вам ударом снёс пол-оскала
По мне судят рэп, как оперу по Ла Скала

[Припев]
Твоя мамаша себе точно горло полоскала
После того, как она меня поласкала
"""

SECOND_TRACK = """## Молоко
[Verse 2]
Я пью с утра холодное молоко (йе)
А ты стоишь так далеко
(Эй!)
Дорога к дому нелегка
И тянется издалека
"""


@pytest.fixture()
def shalom_text() -> str:
    return SHALOM


@pytest.fixture()
def shalom_split_text() -> str:
    return SHALOM_SPLIT


@pytest.fixture()
def second_track_text() -> str:
    return SECOND_TRACK


@pytest.fixture()
def lyrics_file(tmp_path):
    path = tmp_path / "lyrics.md"
    path.write_text(SHALOM + "\n" + SECOND_TRACK, encoding="utf8")
    return path
