"""Walk through the remote control interface of a running Soundpad."""

from __future__ import annotations

import os
import time

from soundpad_client import CLIENT_VERSION, ConnectionError, SoundpadClient

PIPE_NAME = os.getenv("SOUNDPAD_PIPE", r"\\.\pipe\sp_remote_control")
SEARCH_TERM = os.getenv("SOUNDPAD_DEMO_SEARCH", "")


def log_section(title: str) -> None:
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80)


def ensure_soundpad(client: SoundpadClient) -> None:
    result = client.execute_safe("IsAlive()")
    if not result.ok:
        raise ConnectionError(f"Cannot reach Soundpad on {PIPE_NAME}: {result.error}")


def main() -> None:
    log_section("Soundpad Python Client: Tour")
    log_level = os.getenv("SOUNDPAD_CLIENT_LOG", "info")
    with SoundpadClient(pipe_name=PIPE_NAME, debounce=0.25, log_level=log_level) as client:
        ensure_soundpad(client)
        print(f"→ Soundpad {client.get_version()}, remote control {client.get_remote_control_version()}")
        if not client.is_compatible():
            print(f"→ Warning: this client speaks interface {CLIENT_VERSION}")

        log_section("Step 1: Sound list")
        sounds = client.get_sounds()
        print(f"→ {client.get_sound_file_count()} sounds in total")
        for sound in sounds[:10]:
            print(f"  #{sound.index:>4} {sound.title} ({sound.duration}, played {sound.play_count}x)")

        log_section("Step 2: Categories")
        for category in client.get_categories():
            for node in category.walk():
                if not node.hidden:
                    print(f"  [{node.index}] {node.name}")

        log_section("Step 3: Playback")
        if sounds:
            first = sounds[0]
            client.play_sound(first.index, render_line=True, capture_line=False)
            time.sleep(0.5)
            print(f"→ {client.get_play_status().value} at {client.get_playback_position()} ms")
            client.stop_sound()
        else:
            print("  (sound list is empty)")

        log_section("Step 4: Search")
        if SEARCH_TERM:
            client.search(SEARCH_TERM)
            client.select_next_hit()
            client.reset_search()
        else:
            print("  (set SOUNDPAD_DEMO_SEARCH to try instant search)")

        print(f"→ Volume {client.get_volume()}, muted: {client.is_muted()}")


if __name__ == "__main__":
    main()
