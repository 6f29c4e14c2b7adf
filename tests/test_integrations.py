"""Tests for external integration connectivity helpers."""

from __future__ import annotations

import dataclasses

import pytest
import pytest_mock

from voicefx.config.settings import Settings
from voicefx.integrations.checks import check_converter, check_telegram, run_all_checks
from conftest import needs_posix_shell


@needs_posix_shell
@pytest.mark.asyncio
async def test_check_converter_success(settings: Settings, make_script) -> None:
    settings = dataclasses.replace(settings, sox_bin=make_script("echo 'sox: SoX v14.4.2'\n"))

    result = await check_converter(settings)

    assert result.success
    assert result.name == "Converter"


@pytest.mark.asyncio
async def test_check_converter_missing_binary(settings: Settings, tmp_path) -> None:
    settings = dataclasses.replace(settings, sox_bin=str(tmp_path / "nowhere" / "sox"))

    result = await check_converter(settings)

    assert not result.success


@needs_posix_shell
@pytest.mark.asyncio
async def test_check_converter_non_zero_exit(settings: Settings, make_script) -> None:
    settings = dataclasses.replace(settings, sox_bin=make_script("exit 1\n"))

    result = await check_converter(settings)

    assert not result.success
    assert "non-success" in result.message.lower()


@pytest.mark.asyncio
async def test_check_telegram_success(mocker: pytest_mock.MockerFixture, settings: Settings) -> None:
    bot_mock = mocker.patch("voicefx.integrations.checks.Bot", autospec=True)
    instance = bot_mock.return_value
    instance.get_me = mocker.AsyncMock(return_value=mocker.MagicMock(is_bot=True))
    instance.session = mocker.MagicMock()
    instance.session.close = mocker.AsyncMock(return_value=None)

    result = await check_telegram(settings)

    assert result.success
    bot_mock.assert_called_once_with(token=settings.api_token)
    instance.session.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_check_telegram_reports_exception(mocker: pytest_mock.MockerFixture, settings: Settings) -> None:
    bot_mock = mocker.patch("voicefx.integrations.checks.Bot", autospec=True)
    instance = bot_mock.return_value
    instance.get_me = mocker.AsyncMock(side_effect=RuntimeError("Unauthorized"))
    instance.session = mocker.MagicMock()
    instance.session.close = mocker.AsyncMock(return_value=None)

    result = await check_telegram(settings)

    assert not result.success
    assert result.message == "Unauthorized"
    instance.session.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_run_all_checks_returns_both(mocker: pytest_mock.MockerFixture, settings: Settings) -> None:
    mocker.patch("voicefx.integrations.checks.Bot", side_effect=RuntimeError("offline"))
    settings = dataclasses.replace(settings, sox_bin="/definitely/missing/sox")

    results = await run_all_checks(settings)

    assert [result.name for result in results] == ["Converter", "Telegram"]
    assert not any(result.success for result in results)
