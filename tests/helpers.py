from datetime import datetime, timezone


class ScriptedInput:
    """Stands in for builtin input(): replays answers and records prompts."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def utc_timestamp(year, month, day, hour=12):
    return datetime(year, month, day, hour, tzinfo=timezone.utc).timestamp()


# 2026-10-12 is a Monday; the week runs through Sunday 2026-10-18
MONDAY = utc_timestamp(2026, 10, 12)
TUESDAY = utc_timestamp(2026, 10, 13)
SUNDAY = utc_timestamp(2026, 10, 18)
