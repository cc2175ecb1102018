"""Fixed physical and numerical constants of the trough extraction engine."""

from astropy import constants as const
from astropy import units

# Speed of light in km/s
LIGHT_SPEED: float = const.c.to(units.km / units.s).value

# C IV 1549 rest-frame transition, the velocity zero-point (Angstroms)
C_IV_WAVELENGTH: float = 1549.0

# Normalized transmission below which a sample counts as absorbed
ABSORPTION_THRESHOLD: float = 0.9

# Runs must be strictly wider than this to be accepted (Angstroms)
MIN_TROUGH_WIDTH: float = 2.0

# Savitzky-Golay smoothing kernel
SAVGOL_WINDOW: int = 5
SAVGOL_POLYORDER: int = 3

# log(L_bol) zero-point applied to the continuum amplitude
LUMINOSITY_ZERO_POINT: float = 46.0

# Relative tolerance when checking the wavelength grid for a constant step
GRID_STEP_RTOL: float = 1e-6

# Output precision (decimal places)
EW_DECIMALS: int = 2
DEPTH_DECIMALS: int = 3
VELOCITY_DECIMALS: int = 0
CONTINUUM_DECIMALS: int = 2
SPECTRAL_INDEX_DECIMALS: int = 3
LUMINOSITY_DECIMALS: int = 2
