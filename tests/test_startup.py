import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent


def test_refuses_to_start_without_credentials(tmp_path):
    # Empty values also win over any local .env file
    env = dict(os.environ, GEMINI_API_KEY="", ELEVENLABS_API_KEY="")
    env["PUBLIC_DIR"] = str(tmp_path)

    result = subprocess.run(
        [sys.executable, "-c", "import main"],
        cwd=PROJECT_ROOT,
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )

    assert result.returncode == 1
    assert "FATAL ERROR" in result.stderr
    assert "ELEVENLABS_API_KEY" in result.stderr
