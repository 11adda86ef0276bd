"""
Microbenchmark: time per update vs number of steps.
Run:
  python benchmarks/bench_steps.py
"""
import time
from kinematics import EARTH_GRAVITY, Particle, Vector, trajectory

def run(steps: int, dt: float = 1/240):
    p = Particle.make(Vector(0.0, 0.0, 100.0), Vector(3.0, 0.0, 15.0), 0.1)

    # warmup
    for _ in trajectory(p, dt, [EARTH_GRAVITY] * 100):
        pass

    t0 = time.perf_counter()
    for last in trajectory(p, dt, [EARTH_GRAVITY] * steps):
        pass
    t1 = time.perf_counter()

    return (t1 - t0) / steps, last

if __name__ == "__main__":
    for n in [1_000, 10_000, 100_000]:
        per_step, last = run(n)
        print(f"N={n:7d}  update={1e6*per_step:8.3f} us  steps/s={1/per_step:10.1f}  z={last.position.z:.3f}")
