from pathlib import Path

### TEAMS ###
ROBOTS_PER_TEAM = 20  # robot numbers 1..20 play for the first team, 21.. for the second

### UNITS ###
MM_PER_M = 1000.0  # engine works in metres, consumers in millimetres
MS_PER_S = 1000.0

### SIMULATION SETTINGS ###
SIM_STEP_LENGTH_MS = 10.0  # length of one physics step
PLANAR_BALL_HEIGHT = 50.0  # mm, the planar engine has no height so the ball is placed at its radius

### BALL MODEL ###
CURVE_STDDEV_PER_SECOND = 0.015  # rad of curve stddev per second elapsed between samples
BALL_FRICTION = 0.0  # m/s^2 deceleration applied by the planar engine, 0 disables it

### POSE ###
UPRIGHT_MIN_COS = 0.3  # z-axis of the body must not tilt further than ~72.5 deg to count as upright

### SCENE ###
ROBOTS_GROUP = "RoboCup.robots"
EXTRAS_GROUP = "RoboCup.extras"
NAME_SEPARATOR = "."

PROFILES_DIR = Path(__file__).parent / "profiles"
