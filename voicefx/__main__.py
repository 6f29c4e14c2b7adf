from voicefx.bot_service.bot import run

run()
