# main.py
import argparse
import json

from api.api import analyze
from assistant import ask_assistant, canned_response
from config import clip, configure_logging, get_settings
from models import ContentType

TYPE_CHOICES = [t.value for t in ContentType]


def print_json(obj):
    print(json.dumps(obj, indent=2, ensure_ascii=False))


def analyze_loop(limit: int):
    print("Phishing Content Detector - heuristic demo\n")
    while True:
        try:
            kind = input(f"Content type [{'/'.join(TYPE_CHOICES)}] (press Enter to exit): ").strip().lower()
            if kind == "":
                break
            if kind not in TYPE_CHOICES:
                print(f"Unknown type: {kind}")
                continue
            content = input("Paste content to analyze: ")
            verdict = analyze(clip(content, limit), ContentType(kind))
            print_json(verdict.to_dict())
        except (KeyboardInterrupt, EOFError):
            break


def chat_loop(offline: bool):
    print("Security assistant - ask about phishing and online safety\n")
    history = []
    while True:
        try:
            message = input("You: ").strip()
            if message == "":
                break
            if offline:
                answer = canned_response(message)
            else:
                answer = ask_assistant(message, history).response
            print(f"Assistant: {answer}\n")
            history.append({"role": "user", "content": message})
            history.append({"role": "assistant", "content": answer})
        except (KeyboardInterrupt, EOFError):
            break


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Analyze email, URL, SMS or social content for phishing.")
    parser.add_argument("--type", choices=TYPE_CHOICES, help="Content type for a one-shot analysis")
    parser.add_argument("--content", help="Content for a one-shot analysis")
    parser.add_argument("--chat", action="store_true", help="Talk to the security assistant")
    parser.add_argument("--offline", action="store_true", help="Use built-in assistant answers only")
    return parser


def main():
    settings = get_settings()
    configure_logging(settings.log_level)
    args = build_parser().parse_args()

    if args.chat:
        chat_loop(args.offline)
    elif args.content is not None:
        verdict = analyze(clip(args.content, settings.max_content_length), ContentType(args.type or "email"))
        print_json(verdict.to_dict())
    else:
        analyze_loop(settings.max_content_length)


if __name__ == "__main__":
    main()
