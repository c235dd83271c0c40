from __future__ import annotations

import argparse
import sys
from typing import List

from dotenv import find_dotenv, load_dotenv

from .ai_integration import get_gemini_model
from .config import load_settings
from .git_utils import GitRunner
from .github_utils import get_github_client
from .pipeline import run_pipeline


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Draft a PR description for the current branch with Gemini and push it to its open GitHub PR"
    )
    parser.parse_args(argv)

    print("🎆 AI PR Description Generator Starting...")
    print("=" * 50)
    try:
        load_dotenv(find_dotenv(usecwd=True))
        settings = load_settings()
        run_pipeline(
            settings,
            git=GitRunner(),
            gh=get_github_client(settings),
            model=get_gemini_model(settings),
        )
    except KeyboardInterrupt:
        print("\n⚠️  Process interrupted by user", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
