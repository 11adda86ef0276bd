# examples/minimal_freefall.py
from kinematics import Particle, Simulation, Vector

sim = Simulation(dt=1/240, acceleration=Vector(0.0, 0.0, -9.81))

ball = Particle.make(
    position=Vector(0.0, 0.0, 10.0),
    velocity=Vector(0.0, 0.0, 0.0),
    radius=0.1,
)

t_end = 1.0
while sim.time < t_end - 1e-12:
    ball = sim.step(ball)

print("t:", sim.time)
print("pos:", ball.position)
print("vel:", ball.velocity)
