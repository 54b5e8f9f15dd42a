import logging

from yeewave import Simulation, radar_scene

logging.basicConfig(level=logging.INFO)

# Five sources on the left edge, walls and a conducting block, absorbing edges
sim = Simulation(radar_scene(), substeps=5)
results = sim.run(frames=200, record_every=10)
sim.save_results("radar.h5")
print(f"Recorded {len(results['Ez'])} frames, final energy {results['energy'][-1]:.4g}")
