# Entry generators: monthly diaries and single notes

from jotter.entries.diary import create_diary_from_seed, create_diary_in_directory
from jotter.entries.note import create_note_from_seed, create_note_in_directory

__all__ = [
    "create_diary_from_seed",
    "create_diary_in_directory",
    "create_note_from_seed",
    "create_note_in_directory",
]
