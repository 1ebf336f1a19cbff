"""Formatters for the remote control command strings.

Every function returns the exact text written to the pipe, e.g.
``play_sound(3, True, False) == "DoPlaySound(3, true, false)"``.
"""

from __future__ import annotations

from typing import Union

Arg = Union[int, bool, str]


def _render(value: Arg) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    return f'"{value}"'


def format_command(name: str, *args: Arg, separator: str = ", ") -> str:
    return f"{name}({separator.join(_render(arg) for arg in args)})"


# Remote control v1.0.0


def play_sound(index: int, render_line: bool | None = None, capture_line: bool | None = None) -> str:
    if render_line is None and capture_line is None:
        return format_command("DoPlaySound", index)
    # An omitted line keeps Soundpad's default of playing on it
    return format_command(
        "DoPlaySound",
        index,
        True if render_line is None else render_line,
        True if capture_line is None else capture_line,
    )


def play_previous_sound() -> str:
    return format_command("DoPlayPreviousSound")


def play_next_sound() -> str:
    return format_command("DoPlayNextSound")


def stop_sound() -> str:
    return format_command("DoStopSound")


def toggle_pause() -> str:
    return format_command("DoTogglePause")


def jump(time_ms: int) -> str:
    return format_command("DoJumpMs", time_ms)


def seek(time_ms: int) -> str:
    return format_command("DoSeekMs", time_ms)


def start_recording() -> str:
    return format_command("DoStartRecording")


def stop_recording() -> str:
    return format_command("DoStopRecording")


def search(term: str) -> str:
    return format_command("DoSearch", term)


def reset_search() -> str:
    return format_command("DoResetSearch")


def select_previous_hit() -> str:
    return format_command("DoSelectPreviousHit")


def select_next_hit() -> str:
    return format_command("DoSelectNextHit")


def select_row(row: int) -> str:
    return format_command("DoSelectIndex", row)


def scroll_by(rows: int) -> str:
    return format_command("DoScrollBy", rows)


def scroll_to(row: int) -> str:
    return format_command("DoScrollTo", row)


def get_sound_file_count() -> str:
    return format_command("GetSoundFileCount")


def get_playback_position() -> str:
    return format_command("GetPlaybackPositionInMs")


def get_playback_duration() -> str:
    return format_command("GetPlaybackDurationInMs")


def get_recording_position() -> str:
    return format_command("GetRecordingPositionInMs")


def get_recording_peak() -> str:
    return format_command("GetRecordingPeak")


def get_soundlist(from_index: int | None = None, to_index: int | None = None) -> str:
    if from_index is None:
        if to_index is not None:
            raise ValueError("to_index requires from_index")
        return format_command("GetSoundlist")
    if to_index is None:
        return format_command("GetSoundlist", from_index)
    # Soundpad's own client sends this range without a space
    return format_command("GetSoundlist", from_index, to_index, separator=",")


def get_title_text() -> str:
    return format_command("GetTitleText")


def get_status_bar_text() -> str:
    return format_command("GetStatusBarText")


def get_play_status() -> str:
    return format_command("GetPlayStatus")


def get_version() -> str:
    return format_command("GetVersion")


def get_remote_control_version() -> str:
    return format_command("GetRemoteControlVersion")


def add_sound(url: str, index: int | None = None) -> str:
    if index is None:
        return format_command("DoAddSound", url)
    return format_command("DoAddSound", url, index)


def remove_selected_entries(remove_on_disk: bool = False) -> str:
    return format_command("DoRemoveSelectedEntries", remove_on_disk)


def undo() -> str:
    return format_command("DoUndo")


def redo() -> str:
    return format_command("DoRedo")


def save_soundlist() -> str:
    return format_command("DoSaveSoundlist")


def get_volume() -> str:
    return format_command("GetVolume")


def is_muted() -> str:
    return format_command("IsMuted")


def set_volume(volume: int) -> str:
    return format_command("SetVolume", volume)


def toggle_mute() -> str:
    return format_command("DoToggleMute")


def is_alive() -> str:
    return format_command("IsAlive")


# Remote control v1.1.0


def play_selected_sound() -> str:
    return format_command("DoPlaySelectedSound")


def play_current_sound_again() -> str:
    return format_command("DoPlayCurrentSoundAgain")


def play_previously_played_sound() -> str:
    return format_command("DoPlayPreviouslyPlayedSound")


def add_category(name: str, parent_category_index: int = -1) -> str:
    return format_command("DoAddCategory", name, parent_category_index)


def add_sound_to_category(url: str, category_index: int, position: int) -> str:
    return format_command("DoAddSound", url, category_index, position)


def start_recording_speakers() -> str:
    return format_command("DoStartRecordingSpeakers")


def start_recording_microphone() -> str:
    return format_command("DoStartRecordingMicrophone")


def select_category(category_index: int) -> str:
    return format_command("DoSelectCategory", category_index)


def select_previous_category() -> str:
    return format_command("DoSelectPreviousCategory")


def select_next_category() -> str:
    return format_command("DoSelectNextCategory")


def remove_category(category_index: int) -> str:
    return format_command("DoRemoveCategory", category_index)


def get_categories(with_sounds: bool = False, with_icons: bool = False) -> str:
    return format_command("GetCategories", with_sounds, with_icons)


def get_category(category_index: int, with_sounds: bool = False, with_icons: bool = False) -> str:
    return format_command("GetCategory", category_index, with_sounds, with_icons)


# Remote control v1.1.1


def play_sound_from_category(
    category_index: int,
    position: int,
    render_line: bool = True,
    capture_line: bool = True,
) -> str:
    return format_command("DoPlaySoundFromCategory", category_index, position, render_line, capture_line)
