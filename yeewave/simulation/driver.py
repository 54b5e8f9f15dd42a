import datetime
import json
import logging
import time
from numbers import Integral
from typing import Dict, Optional, Tuple

import h5py
import numpy as np

from yeewave.config import FieldConfig
from yeewave.const import DEFAULT_SUBSTEPS
from yeewave.errors import InvalidConfiguration
from yeewave.helpers import (check_courant, create_rich_progress, display_parameters,
                             display_status, display_time_elapsed)
from yeewave.simulation.fdtd import FieldState

logger = logging.getLogger(__name__)


class Simulation:
    """Drives a FieldState a fixed number of sub-steps per frame.

    Decouples the physical time resolution (dt) from how often a caller wants
    to look at the field: every frame runs ``substeps`` steps back to back.

    Args:
        state: A FieldState, or a FieldConfig to build one from
        substeps: Steps per frame
        backend: Backend name used when state is a FieldConfig (numpy if omitted).
            A FieldState already owns its backend, so passing both is an error.
        verbose: Print the parameter table, status lines and progress bar
    """
    def __init__(self, state=None, substeps: int = DEFAULT_SUBSTEPS, backend=None, verbose: bool = True):
        if isinstance(substeps, bool) or not isinstance(substeps, Integral) or substeps <= 0:
            raise InvalidConfiguration(f"substeps must be a positive integer, got {substeps!r}")
        if state is None or isinstance(state, FieldConfig):
            state = FieldState(state, backend=backend or "numpy")
        elif backend is not None:
            raise InvalidConfiguration(
                f"backend={backend!r} cannot be applied to an existing FieldState on "
                f"{state.backend.__class__.__name__}; pass a FieldConfig instead")
        self.state = state
        self.substeps = int(substeps)
        self.verbose = verbose
        self.frame = 0
        self.last_frame_seconds = 0.0
        self.results = {"Ez": [], "t": [], "energy": []}
        self.start_time = None

    @property
    def config(self) -> FieldConfig:
        return self.state.config

    def advance_frame(self) -> int:
        """Run one frame of sub-steps and return the number of frames completed."""
        t0 = time.perf_counter()
        for _ in range(self.substeps):
            self.state.step()
        self.last_frame_seconds = time.perf_counter() - t0
        self.frame += 1
        logger.debug("Frame %d: %d steps in %.3f ms", self.frame, self.substeps, 1e3 * self.last_frame_seconds)
        return self.frame

    def record(self) -> None:
        """Store the current Ez, time and energy in results."""
        self.results["Ez"].append(self.state.snapshot())
        self.results["t"].append(self.state.time)
        self.results["energy"].append(self.state.energy())

    def initialize_simulation(self, frames: int) -> None:
        self.start_time = datetime.datetime.now()
        if not self.verbose:
            return
        state = self.state
        display_parameters({
            "Grid": f"{state.width} x {state.height}",
            "Time step": state.dt,
            "Wave speed": state.c,
            "Boundary": state.boundary,
            "Obstacles": len(state.obstacles),
            "Sources": len(state.sources),
            "Frames": frames,
            "Steps per frame": self.substeps,
            "Backend": state.backend.__class__.__name__,
        }, "Simulation Parameters")
        _, courant, limit = check_courant(state.c, state.dt)
        display_status(f"Stability check passed (Courant number = {courant:.3f} / {limit:.3f})", "success")

    def finalize_simulation(self) -> Dict:
        if self.verbose:
            display_status(f"Simulation complete! t = {self.state.time:.4g} after {self.state.step_count} steps", "success")
            display_time_elapsed(self.start_time)
        return self.results

    def run(self, frames: int, record_every: Optional[int] = 1) -> Dict:
        """Run a number of frames, recording the field every record_every frames.

        Args:
            frames: Number of frames to run
            record_every: Record results every nth frame, or never if None

        Returns:
            Dictionary of recorded Ez snapshots, times and energies.
        """
        self.initialize_simulation(frames)
        with create_rich_progress(disable=not self.verbose) as progress:
            task = progress.add_task("Running simulation...", total=frames)
            for _ in range(frames):
                frame = self.advance_frame()
                if record_every and frame % record_every == 0:
                    self.record()
                progress.update(task, advance=1)
        return self.finalize_simulation()

    def save_results(self, filepath: str) -> str:
        """Save recorded results and the configuration to an HDF5 file.

        Args:
            filepath: Path of the file to write

        Returns:
            str: Path to the saved file
        """
        with h5py.File(filepath, 'w') as f:
            meta = f.create_group('metadata')
            meta.attrs['config'] = json.dumps(self.config.to_dict())
            meta.attrs['substeps'] = self.substeps
            meta.attrs['frames'] = self.frame
            meta.attrs['steps'] = self.state.step_count
            meta.attrs['time'] = self.state.time
            meta.attrs['timestamp'] = datetime.datetime.now().isoformat()

            fields = f.create_group('fields')
            ez = np.array(self.results['Ez'], dtype=np.float32).reshape(-1, self.state.height, self.state.width)
            fields.create_dataset('Ez', data=ez)
            f.create_dataset('time', data=np.array(self.results['t'], dtype=np.float64))
            f.create_dataset('energy', data=np.array(self.results['energy'], dtype=np.float64))

        logger.info("Results saved to %s", filepath)
        return filepath

    @classmethod
    def load_results(cls, filepath: str) -> Tuple[Dict, FieldConfig]:
        """Load results written by save_results.

        Returns:
            (results, config): The results dict and the configuration that produced it
        """
        with h5py.File(filepath, 'r') as f:
            config = FieldConfig.from_dict(json.loads(f['metadata'].attrs['config']))
            results = {
                'Ez': list(f['fields']['Ez'][:]),
                't': list(f['time'][:]),
                'energy': list(f['energy'][:]),
            }
        return results, config
