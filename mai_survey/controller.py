import os
import subprocess
import sys
import time
import webbrowser

from mai_survey.utils.log import get_logger, setup_logging

logger = get_logger("mai_survey.controller")

DEFAULT_PORT = 8501


def streamlit_command(main_file: str, port: int = DEFAULT_PORT) -> list:
    return [
        sys.executable,
        "-m",
        "streamlit",
        "run",
        main_file,
        "--server.port",
        str(port),
    ]


def run_streamlit(port: int = DEFAULT_PORT, open_browser: bool = True) -> int:
    # Package directory (holds main.py)
    base_dir = os.path.dirname(os.path.abspath(__file__))

    main_file = os.path.join(base_dir, "main.py")
    if not os.path.exists(main_file):
        logger.error("main.py not found in %s", base_dir)
        return 1

    command = streamlit_command(main_file, port)
    logger.info("starting streamlit app: %s", main_file)

    process = subprocess.Popen(command)

    if open_browser:
        time.sleep(2)
        webbrowser.open(f"http://localhost:{port}")

    try:
        return process.wait()
    except KeyboardInterrupt:
        logger.info("stopping streamlit server")
        process.terminate()
        return 0


def main() -> None:
    setup_logging(os.getenv("MAI_LOG_LEVEL", "INFO"))
    port = int(os.getenv("MAI_PORT", DEFAULT_PORT))
    sys.exit(run_streamlit(port=port))


if __name__ == "__main__":
    main()
