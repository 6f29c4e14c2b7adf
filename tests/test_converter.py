"""Tests for the SoX subprocess wrapper."""

from __future__ import annotations

import logging

import pytest
import pytest_mock

from voicefx.converter import BASE_ARGS, FALLBACK_PRESET, ConversionError, SoxConverter
from conftest import PRESETS, needs_posix_shell

VOICE = b"OggS\x00\x02fake-opus-payload\x00\xff"


def test_unknown_or_empty_preset_uses_fallback() -> None:
    converter = SoxConverter("sox", PRESETS)

    assert converter.build_args("") == ["-t", "opus", "-", "-t", "ogg", "-", "speed", "1.0"]
    assert converter.preset_args("missing") == FALLBACK_PRESET


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_preset_args_are_appended_verbatim(name: str) -> None:
    converter = SoxConverter("sox", PRESETS)

    assert converter.build_args(name) == [*BASE_ARGS, *PRESETS[name]]


@needs_posix_shell
@pytest.mark.asyncio
async def test_passthrough_returns_stdout(make_script) -> None:
    converter = SoxConverter(make_script("cat\n"), PRESETS)

    first = await converter.convert(VOICE, "")
    second = await converter.convert(VOICE, "")

    assert first == VOICE
    assert first == second


@needs_posix_shell
@pytest.mark.asyncio
async def test_process_receives_full_argument_list(make_script) -> None:
    converter = SoxConverter(make_script('cat > /dev/null\nprintf "%s\\n" "$@"\n'), PRESETS)

    output = await converter.convert(VOICE, "robot")

    assert output.decode().splitlines() == [*BASE_ARGS, *PRESETS["robot"]]


@needs_posix_shell
@pytest.mark.asyncio
async def test_non_zero_exit_combines_stdout_and_stderr(make_script) -> None:
    binary = make_script("cat > /dev/null\necho 'sox WARN: clipped'\necho 'bad format' >&2\nexit 2\n")
    converter = SoxConverter(binary, PRESETS)

    with pytest.raises(ConversionError) as excinfo:
        await converter.convert(VOICE, "slow")

    message = str(excinfo.value)
    assert "sox WARN: clipped" in message
    assert "bad format" in message
    assert message.index("clipped") < message.index("bad format")
    assert excinfo.value.returncode == 2


@pytest.mark.asyncio
async def test_missing_binary_raises_conversion_error(tmp_path) -> None:
    converter = SoxConverter(str(tmp_path / "no-such-sox"), PRESETS)

    with pytest.raises(ConversionError, match="Cannot run"):
        await converter.convert(VOICE, "")


@pytest.mark.asyncio
async def test_convert_feeds_stdin_once(mocker: pytest_mock.MockerFixture, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="voicefx.converter.sox")
    process = mocker.MagicMock()
    process.communicate = mocker.AsyncMock(return_value=(b"converted", b""))
    process.returncode = 0
    spawn = mocker.patch(
        "voicefx.converter.sox.asyncio.create_subprocess_exec",
        mocker.AsyncMock(return_value=process),
    )
    converter = SoxConverter("/usr/bin/sox", PRESETS, verbose=True)

    result = await converter.convert(VOICE, "chipmunk")

    assert result == b"converted"
    spawn.assert_awaited_once()
    assert spawn.await_args.args == ("/usr/bin/sox", *BASE_ARGS, *PRESETS["chipmunk"])
    process.communicate.assert_awaited_once_with(VOICE)
    assert f"Received {len(VOICE)} bytes of audio" in caplog.text
