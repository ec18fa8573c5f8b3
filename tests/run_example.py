"""Quick manual runner for the phishing detector pipeline."""

from api.api import analyze, summarize


if __name__ == "__main__":
    samples = [
        ("email", "Hi Anna, the meeting notes are in the shared folder. See you Monday."),
        ("email", "URGENT: verify your password now at http://192.168.1.1/login"),
        ("sms", "Congratulations! You won a free gift card. Claim within 24 hours: https://bit.ly/3kTz9"),
        ("url", "http://paypal.com.secure-account-update.tk/login"),
    ]

    for kind, content in samples:
        verdict = analyze(content, kind)
        print("=" * 80)
        print(f"[{kind}] {content}")
        print(summarize(verdict))
