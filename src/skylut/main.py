import argparse
import sys
import threading
import time
from itertools import cycle
from pathlib import Path

from . import __version__
from .atmosphere.profiles import earth_spectral_atmosphere
from .atmosphere.provider import get_atmosphere
from .derivation.glsl import format_glsl_header
from .errors import ImageWriteError, handle_error
from .lut.generator import generate_transmittance_lut
from .metadata.embedder import (
    LUT_FILENAME,
    PREVIEW_FILENAME,
    write_lut_exr,
    write_lut_preview,
)
from .texture.parameterization import (
    TRANSMITTANCE_TEXTURE_HEIGHT,
    TRANSMITTANCE_TEXTURE_WIDTH,
)


class Spinner:
    """Simple terminal spinner for long-running operations."""

    def __init__(self, message: str):
        self.message = message
        self._stop_event = threading.Event()
        self._spinner_thread = None
        self._chars = cycle(["⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"])

    def _spin(self):
        while not self._stop_event.is_set():
            char = next(self._chars)
            sys.stdout.write(f"\r{self.message} {char} ")
            sys.stdout.flush()
            time.sleep(0.1)

    def start(self):
        self._stop_event.clear()
        self._spinner_thread = threading.Thread(target=self._spin, daemon=True)
        self._spinner_thread.start()

    def stop(self):
        if self._spinner_thread:
            self._stop_event.set()
            self._spinner_thread.join()
            self._spinner_thread = None
            sys.stdout.write("\r" + " " * (len(self.message) + 3) + "\r")
            sys.stdout.flush()


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="skylut",
        description="Precompute the atmospheric transmittance lookup texture.",
    )
    parser.add_argument(
        "output_dir",
        type=str,
        help=f"Directory to write {LUT_FILENAME} into",
    )
    return parser.parse_args(argv)


def generate_lut(output_dir: str, preset: str = "earth") -> int:
    """Compute the transmittance LUT and write it to output_dir.

    Args:
        output_dir: Directory receiving the EXR image and its PNG preview
        preset: Name of the atmosphere preset to precompute

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        print(f"skylut {__version__}")
        print("Derived atmosphere parameters:")
        print(format_glsl_header(earth_spectral_atmosphere()))

        atmosphere = get_atmosphere(preset)
        width = TRANSMITTANCE_TEXTURE_WIDTH
        height = TRANSMITTANCE_TEXTURE_HEIGHT

        output_path = Path(output_dir)
        try:
            output_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ImageWriteError(str(output_path), str(e)) from e

        print(f"Computing {width}x{height} transmittance LUT ({preset})")
        spinner = Spinner("Integrating optical depth")
        spinner.start()
        try:
            buffer = generate_transmittance_lut(atmosphere, width, height)
        finally:
            spinner.stop()
        print(f"  Transmittance min: {buffer.min():.6f}, max: {buffer.max():.6f}")

        lut_file = output_path / LUT_FILENAME
        write_lut_exr(buffer, width, height, str(lut_file))
        print(f"LUT saved to: {lut_file}")

        preview_file = output_path / PREVIEW_FILENAME
        write_lut_preview(buffer, width, height, atmosphere, str(preview_file))
        print(f"Preview saved to: {preview_file}")

        return 0

    except ImageWriteError as e:
        return handle_error(e, "writing the transmittance LUT")
    except Exception as e:
        return handle_error(e, "generating the transmittance LUT")


def main(argv=None):
    """CLI entry point."""
    args = parse_args(argv)

    exit_code = generate_lut(args.output_dir)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
