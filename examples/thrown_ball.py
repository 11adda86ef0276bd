# examples/thrown_ball.py
# A ball thrown at 45 degrees, advanced in one exact step to its landing time.
import math

from kinematics import EARTH_GRAVITY, STANDARD_GRAVITY, Particle, Vector

speed = 20.0
direction = Vector(1.0, 0.0, 1.0).unit()
ball = Particle.make(Vector(), direction * speed, radius=0.11)

t_flight = 2.0 * ball.velocity.z / STANDARD_GRAVITY
landed = ball.update(t_flight, EARTH_GRAVITY)

print("flight time:", t_flight)
print("range:", landed.position.x, "exp", speed * speed / STANDARD_GRAVITY)
print("landing velocity:", landed.velocity)
print("landing speed:", landed.velocity.magnitude(), "exp", speed)
print("height:", landed.position.z, "close to zero:", math.isclose(landed.position.z, 0.0, abs_tol=1e-9))
