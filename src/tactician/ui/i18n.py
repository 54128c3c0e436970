"""Internationalisation strings for the Tactician UI.

Usage::

    from tactician.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_retry)          # "Ещё раз"
    print(t().result_answer.format(san="Nf3"))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_puzzle: str
    menu_next_puzzle: str
    menu_retry: str
    menu_flip_board: str
    menu_quit: str

    status_puzzle: str  # e.g. "Puzzle {number} of {total}"

    # Result label
    turn_white: str
    turn_black: str
    result_correct: str
    result_incorrect: str
    result_answer: str  # "Answer: {san}"

    # ── ControlPanel ─────────────────────────────────────────────────────
    btn_give_up: str
    btn_retry: str
    btn_next: str
    btn_flip: str


_EN = Strings(
    window_title="Tactician",
    menu_puzzle="&Puzzle",
    menu_next_puzzle="&Next puzzle",
    menu_retry="&Retry",
    menu_flip_board="&Flip board",
    menu_quit="&Quit",
    status_puzzle="Puzzle {number} of {total}",
    turn_white="White to move",
    turn_black="Black to move",
    result_correct="Correct!",
    result_incorrect="Incorrect, try again",
    result_answer="Answer: {san}",
    btn_give_up="?",
    btn_retry="Retry",
    btn_next="Next",
    btn_flip="Flip",
)

_RU = Strings(
    window_title="Tactician",
    menu_puzzle="&Задача",
    menu_next_puzzle="&Следующая задача",
    menu_retry="&Ещё раз",
    menu_flip_board="&Перевернуть доску",
    menu_quit="&Выход",
    status_puzzle="Задача {number} из {total}",
    turn_white="Ход белых",
    turn_black="Ход чёрных",
    result_correct="Верно!",
    result_incorrect="Неверно, попробуйте ещё раз",
    result_answer="Ответ: {san}",
    btn_give_up="?",
    btn_retry="Ещё раз",
    btn_next="Дальше",
    btn_flip="Перевернуть",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
