#!/usr/bin/env python
"""Terminal front end for the chat service.

Plain lines are sent as messages. Commands:
    /attach PATH [PATH ...]   attach up to four images to the next message
    /record, /stop            start or stop dictation
    /quit                     exit
"""
from __future__ import annotations

import argparse
import asyncio

from mediachat.client import ChatAPIClient, ConversationController
from mediachat.config import get_settings
from mediachat.utils.logging_config import setup_logging


def print_new(controller: ConversationController, seen: int) -> int:
    messages = controller.messages
    for msg in messages[seen:]:
        images = f" [{len(msg.images)} image(s)]" if msg.images else ""
        print(f"{msg.role}:{images} {msg.content}")
    return len(messages)


async def repl(controller: ConversationController) -> None:
    seen = 0
    while True:
        line = (await asyncio.to_thread(input, "> ")).strip()
        if line == "/quit":
            return
        if line.startswith("/attach"):
            controller.attach_files(line.split()[1:])
            print(f"{len(controller.attachments)} file(s) attached")
        elif line == "/record":
            controller.start_recording()
        elif line == "/stop":
            controller.stop_recording()
            if controller.input_text:
                print(f"(dictated) {controller.input_text}")
        else:
            controller.input_text = line or controller.input_text
            await controller.send_message()
            seen = print_new(controller, seen)


async def run(url: str, locale: str, max_attachments: int) -> None:
    api = ChatAPIClient(url)
    controller = ConversationController(api, notify=print, locale=locale, max_attachments=max_attachments)
    try:
        await repl(controller)
    finally:
        await api.close()


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Chat with the media chat service")
    parser.add_argument("--url", default=settings.chat_api_url)
    parser.add_argument("--locale", default=settings.dictation_locale)
    parser.add_argument("--log_level", default="WARNING")
    args = parser.parse_args()

    setup_logging(args.log_level)
    try:
        asyncio.run(run(args.url, args.locale, settings.max_attachments))
    except (EOFError, KeyboardInterrupt):
        print()


if __name__ == "__main__":
    main()
