# === Central Hyperparameter Definition ===
# --- Swarm Defaults ---
NUM_PARTICLES = 30
C_GLOBAL = 1.0  # Acceleration towards the global best
C_LOCAL = 0.5  # Acceleration towards the particle's own best
MAX_V = 0.05  # Fraction of the bound range per step
MAX_ITERATIONS = 200
MAX_CONST_ITERATIONS = 25  # Steps without global best improvement before convergence
REFLECT = True  # Reflect at the bounding box instead of marking particles infeasible

# --- Valid Ranges (used by Parameters.check) ---
NUM_PARTICLES_RANGE = (1, 1000)
ACCELERATION_RANGE = (0.0, 2.0)
MAX_V_RANGE = (1e-6, 1.0)
MAX_ITERATIONS_RANGE = (1, 10000)
MIN_CONST_ITERATIONS = 2  # Upper bound is the (clamped) max_iterations

# --- Runner Config ---
DEFAULT_FUNCTION = "rastrigin"
DEFAULT_DIM = 2
DEFAULT_SEED = None  # None draws fresh OS entropy

# --- Output Config ---
FIGURES_DIR = "Figures/"
