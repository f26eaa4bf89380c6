# Device Simulator
# Serves embedded-device web assets over HTTP plus a WebSocket echo channel,
# so the device UI can be exercised without flashing the target

__version__ = "0.1.0"

from device_simulator.config import SimulatorSettings, settings_from_env

__all__ = [
    "__version__",
    "SimulatorSettings",
    "settings_from_env",
]
