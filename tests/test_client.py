from datetime import timedelta

import pytest

from soundpad_client import (
    CommandNotFoundError,
    ConnectionError,
    NotFoundError,
    PipeTransport,
    PlayStatus,
    Sound,
    SoundpadClient,
    TransportError,
)


class DummyTransport:
    def __init__(self, *responses: "str | Exception") -> None:
        self.responses = list(responses)
        self.commands: list[str] = []
        self.cooldowns: list[float] = []
        self.closed = False

    def send_request(self, command: str, *, cooldown: float = 0.0) -> str:
        self.commands.append(command)
        self.cooldowns.append(cooldown)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True


class RecordingLogger:
    def __init__(self) -> None:
        self.warnings: list[str] = []

    def debug(self, msg: str, *args) -> None:
        pass

    def info(self, msg: str, *args) -> None:
        pass

    def warn(self, msg: str, *args) -> None:
        self.warnings.append(msg % args)

    def error(self, msg: str, *args) -> None:  # pragma: no cover - not used
        pass


def make_client(*responses: "str | Exception", **kwargs) -> tuple[SoundpadClient, DummyTransport, RecordingLogger]:
    transport = DummyTransport(*responses)
    logger = RecordingLogger()
    client = SoundpadClient(transport=transport, logger=logger, **kwargs)
    return client, transport, logger


BOOL_COMMANDS = [
    (lambda c: c.play_sound(1), "DoPlaySound(1)"),
    (lambda c: c.play_sound(1, True, False), "DoPlaySound(1, true, false)"),
    (lambda c: c.stop_sound(), "DoStopSound()"),
    (lambda c: c.toggle_pause(), "DoTogglePause()"),
    (lambda c: c.seek(5000), "DoSeekMs(5000)"),
    (lambda c: c.search("cue"), 'DoSearch("cue")'),
    (lambda c: c.scroll_by(-3), "DoScrollBy(-3)"),
    (lambda c: c.add_sound(r"C:\cue.mp3", 4, category_index=2), r'DoAddSound("C:\cue.mp3", 2, 4)'),
    (lambda c: c.set_volume(50), "SetVolume(50)"),
    (lambda c: c.is_alive(), "IsAlive()"),
    (lambda c: c.add_category("Memes"), 'DoAddCategory("Memes", -1)'),
    (lambda c: c.select_category(3), "DoSelectCategory(3)"),
    (lambda c: c.play_sound_from_category(-1, 5, True, False), "DoPlaySoundFromCategory(-1, 5, true, false)"),
]


@pytest.mark.parametrize(("call", "command"), BOOL_COMMANDS)
def test_bool_commands_succeed_on_r200(call, command: str) -> None:
    client, transport, logger = make_client("R-200")
    assert call(client) is True
    assert transport.commands == [command]
    assert logger.warnings == []


@pytest.mark.parametrize(("call", "command"), BOOL_COMMANDS)
def test_bool_commands_report_other_status_codes(call, command: str) -> None:
    client, _, logger = make_client("R-404: Sound not found.")
    assert call(client) is False
    assert logger.warnings == ["Failed: R-404: Sound not found."]


def test_numeric_response_is_decoded() -> None:
    client, transport, _ = make_client("5000")
    assert client.get_playback_position() == 5000
    assert transport.commands == ["GetPlaybackPositionInMs()"]


def test_non_numeric_response_yields_default_and_diagnostic() -> None:
    client, _, logger = make_client("abc")
    assert client.get_sound_file_count() == -1
    assert logger.warnings == ["Expected numeric response, but received: abc"]


def test_volume_and_mute_defaults() -> None:
    client, _, _ = make_client("", "1", "0")
    assert client.get_volume() == 0
    assert client.is_muted() is True
    assert client.is_muted() is False


@pytest.mark.parametrize(("version", "expected"), [("1.1.1", True), ("1.0.0", False), ("", False)])
def test_is_compatible(version: str, expected: bool) -> None:
    client, transport, _ = make_client(version)
    assert client.is_compatible() is expected
    assert transport.commands == ["GetRemoteControlVersion()"]


def test_offline_is_reported_differently_from_not_found() -> None:
    client, _, logger = make_client(ConnectionError("Could not connect to Soundpad. Is it running?"), "R-404")
    assert client.stop_sound() is False
    assert client.stop_sound() is False
    assert logger.warnings == ["Remote control is offline.", "Failed: R-404"]


def test_transport_failure_never_raises_from_wrappers() -> None:
    client, _, logger = make_client(TransportError("broken pipe"))
    assert client.get_recording_peak() == -1
    assert logger.warnings == ["Remote control is offline."]


def test_print_errors_disables_diagnostics() -> None:
    client, _, logger = make_client("abc", print_errors=False)
    assert client.get_volume() == 0
    assert logger.warnings == []


def test_play_status_falls_back_to_stopped() -> None:
    client, _, logger = make_client("PLAYING", "R-500", "BUFFERING", "REWINDING")
    assert client.get_play_status() is PlayStatus.PLAYING
    assert client.get_play_status() is PlayStatus.STOPPED
    assert client.get_play_status() is PlayStatus.STOPPED
    # Anything starting with "R" is classified as a status code
    assert client.get_play_status() is PlayStatus.STOPPED
    assert logger.warnings == ["Failed: R-500", "Unknown play status: BUFFERING", "Failed: REWINDING"]


def test_get_sounds_parses_xml() -> None:
    xml = '<Soundlist><Sound index="7" title="cue" url="C:\\cue.mp3" duration="0:03" playCount="2"/></Soundlist>'
    client, transport, _ = make_client(xml)
    sounds = client.get_sounds(7, 7)
    assert transport.commands == ["GetSoundlist(7,7)"]
    assert sounds[0].index == 7
    assert sounds[0].duration == timedelta(seconds=3)


def test_get_sounds_returns_empty_list_on_failure() -> None:
    client, _, logger = make_client("", "<Soundlist><Sound")
    assert client.get_sounds() == []
    assert client.get_sounds() == []
    assert logger.warnings[0] == "Remote control is offline."
    assert logger.warnings[1].startswith("Invalid XML response")


def test_get_category_returns_first_match() -> None:
    client, transport, _ = make_client('<Categories><Category index="2" name="Memes"/></Categories>', "R-404")
    category = client.get_category(2, with_sounds=True)
    assert category is not None and category.name == "Memes"
    assert transport.commands == ["GetCategory(2, true, false)"]
    assert client.get_category(9) is None


def test_play_uses_debounce_plus_duration_as_cooldown() -> None:
    client, transport, _ = make_client("R-200", debounce=0.5)
    sound = Sound(index=3, title="cue", url="C:\\cue.mp3", duration=timedelta(seconds=2))
    assert client.play(sound) is True
    assert transport.commands == ["DoPlaySound(3)"]
    assert transport.cooldowns == [2.5]


def test_execute_returns_payloads_and_raises_for_status() -> None:
    client, _, _ = make_client("42", "R-404: Command not found.", "R-404: Sound not found.")
    assert client.execute("GetVolume()") == "42"
    with pytest.raises(CommandNotFoundError):
        client.execute("DoDance()")
    with pytest.raises(NotFoundError):
        client.execute("DoPlaySound(99)")


def test_execute_propagates_transport_errors() -> None:
    client, _, _ = make_client(TransportError("broken pipe"))
    with pytest.raises(TransportError):
        client.execute("IsAlive()")


def test_execute_safe_wraps_exceptions() -> None:
    client, _, _ = make_client("R-500", "R-200")
    result = client.execute_safe("DoSaveSoundlist()")
    assert result.ok is False
    assert result.error is not None and getattr(result.error, "status") == 500
    assert result.unwrap_or("fallback") == "fallback"
    assert client.execute_safe("DoSaveSoundlist()").unwrap() == "R-200"


def test_context_manager_closes_transport() -> None:
    client, transport, _ = make_client()
    with client:
        pass
    assert transport.closed is True


def test_client_recovers_after_pipe_failure(make_pipe, make_opener, clock) -> None:
    broken = make_pipe([OSError(109, "The pipe has been ended")])
    fresh = make_pipe([b"R-200"])
    opener = make_opener([broken, fresh])
    logger = RecordingLogger()
    transport = PipeTransport(opener=opener, clock=clock, sleep=clock.sleep, logger=logger)
    client = SoundpadClient(transport=transport, logger=logger)

    assert client.is_alive() is False
    assert client.is_alive() is True
    assert len(opener.opened) == 2


def test_default_transport_is_a_pipe_transport() -> None:
    client = SoundpadClient(pipe_name=r"\\.\pipe\test", logger=RecordingLogger())
    assert isinstance(client._transport, PipeTransport)
    assert client._transport.pipe_name == r"\\.\pipe\test"


def test_invalid_arguments_raise_before_sending() -> None:
    client, transport, _ = make_client()
    with pytest.raises(ValueError):
        client.get_soundlist(to_index=3)
    with pytest.raises(ValueError):
        client.add_sound(r"C:\cue.mp3", category_index=2)
    assert transport.commands == []
