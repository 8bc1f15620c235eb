from __future__ import annotations

import sys

from dotenv import load_dotenv

from chatbridge import AiClientError, get_ai_client
from chatbridge.utils.logger import setup_logger


def main():
    load_dotenv(".env", override=False)
    setup_logger(level="WARNING")
    provider = sys.argv[1] if len(sys.argv) > 1 else None
    client = get_ai_client(provider)
    print(f"Chatting with {client.provider} ({client.model}). Type /quit to exit.")

    while True:
        user_input = input("you> ").strip()
        if user_input.lower() in {"/quit", "quit", "exit"}:
            break
        if not user_input:
            continue
        try:
            response = client.generate_text(user_input)
        except AiClientError as exc:
            response = f"Error: {exc}"
        print("bot>", response)


if __name__ == "__main__":
    main()
