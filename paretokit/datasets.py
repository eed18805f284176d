"""Static device/sensor datasets standing in for an external telemetry source."""

from typing import Dict, Tuple

from .models import Observation

Dataset = Tuple[Observation, ...]


def _dataset(*pairs: Tuple[str, int]) -> Dataset:
    return tuple(Observation(category=category, count=count) for category, count in pairs)


DEFAULT_DATASET: Dataset = _dataset(
    ("Surface Scratches", 342),
    ("Dimensional Variance", 287),
    ("Material Defects", 234),
    ("Assembly Misalignment", 189),
    ("Paint/Coating Issues", 156),
    ("Weld Defects", 123),
    ("Electrical Faults", 98),
    ("Missing Components", 76),
    ("Packaging Damage", 54),
    ("Calibration Errors", 43),
    ("Tool Wear", 32),
    ("Environmental Issues", 21),
    ("Documentation Errors", 15),
    ("Other", 12),
)

DEFAULT_TITLE = "Manufacturing Quality Defects - Pareto Analysis"
DEFAULT_DESCRIPTION = (
    "Comprehensive analysis of quality issues to identify critical improvement areas "
    "using the 80/20 principle"
)

DEVICE_LABELS: Dict[str, str] = {
    "device-001": "Device-001 (Production Line A)",
    "device-002": "Device-002 (Production Line B)",
    "device-003": "Device-003 (Quality Control)",
    "device-004": "Device-004 (Packaging Unit)",
    "device-005": "Device-005 (Assembly Station)",
    "cluster-west": "Cluster-West (Multiple Devices)",
    "cluster-east": "Cluster-East (Multiple Devices)",
    "compute-node-1": "Compute-Node-1",
    "compute-node-2": "Compute-Node-2",
    "edge-gateway-01": "Edge-Gateway-01",
}

SENSOR_LABELS: Dict[str, str] = {
    "temperature": "Temperature Sensor",
    "pressure": "Pressure Sensor",
    "vibration": "Vibration Sensor",
    "humidity": "Humidity Sensor",
    "flow-rate": "Flow Rate Sensor",
    "power-consumption": "Power Consumption",
    "error-logs": "Error Logs",
    "performance-metrics": "Performance Metrics",
    "network-latency": "Network Latency",
    "cpu-usage": "CPU Usage",
    "memory-usage": "Memory Usage",
    "disk-io": "Disk I/O",
}

DEVICE_SENSOR_DATASETS: Dict[str, Dict[str, Dataset]] = {
    "device-001": {
        "temperature": _dataset(
            ("Overheating Events", 285),
            ("Temperature Spikes", 162),
            ("Cooling System Failures", 145),
            ("Sensor Drift", 98),
            ("Calibration Issues", 67),
            ("Environmental Factors", 45),
            ("Hardware Malfunction", 23),
        ),
        "pressure": _dataset(
            ("Pressure Drops", 178),
            ("System Leaks", 156),
            ("Valve Failures", 143),
            ("Pump Issues", 98),
            ("Blockages", 67),
            ("Sensor Errors", 34),
            ("Maintenance Issues", 19),
        ),
        "vibration": _dataset(
            ("Bearing Wear", 192),
            ("Misalignment", 167),
            ("Imbalance", 134),
            ("Looseness", 98),
            ("Belt Issues", 65),
            ("Motor Problems", 43),
            ("Foundation Issues", 21),
        ),
        "humidity": _dataset(
            ("Moisture Buildup", 164),
            ("Condensation Issues", 148),
            ("Ventilation Problems", 125),
            ("Seal Failures", 89),
            ("Weather Impact", 56),
            ("HVAC Malfunction", 34),
            ("Insulation Degradation", 18),
        ),
    },
    "device-002": {
        "temperature": _dataset(
            ("Thermal Overload", 173),
            ("Heat Exchanger Issues", 158),
            ("Insulation Problems", 141),
            ("Ambient Temperature", 89),
            ("Control System Errors", 67),
            ("Maintenance Delays", 34),
            ("Design Limitations", 16),
        ),
        "flow-rate": _dataset(
            ("Flow Restrictions", 289),
            ("Pump Degradation", 164),
            ("Pipe Corrosion", 147),
            ("Control Valve Issues", 125),
            ("Filter Clogging", 89),
            ("Measurement Errors", 43),
            ("System Design", 28),
        ),
        "power-consumption": _dataset(
            ("Motor Inefficiency", 195),
            ("Load Variations", 171),
            ("Power Quality Issues", 152),
            ("Equipment Aging", 138),
            ("Control System Faults", 94),
            ("Environmental Conditions", 56),
            ("Maintenance Neglect", 29),
        ),
    },
    "device-003": {
        "vibration": _dataset(
            ("Quality Control Failures", 356),
            ("Calibration Drift", 234),
            ("Measurement Inconsistency", 198),
            ("Operator Errors", 176),
            ("Equipment Wear", 154),
            ("Environmental Interference", 132),
            ("Software Glitches", 98),
        ),
        "pressure": _dataset(
            ("Inspection Failures", 242),
            ("Tolerance Violations", 218),
            ("Material Defects", 187),
            ("Process Variations", 165),
            ("Tool Wear", 143),
            ("Setup Errors", 98),
            ("Documentation Issues", 65),
        ),
    },
    "device-004": {
        "power-consumption": _dataset(
            ("Packaging Line Jams", 403),
            ("Label Misalignment", 267),
            ("Seal Quality Issues", 234),
            ("Material Feed Problems", 198),
            ("Speed Variations", 176),
            ("Conveyor Issues", 145),
            ("Sensor Malfunctions", 123),
        ),
        "temperature": _dataset(
            ("Heat Sealing Problems", 287),
            ("Cooling System Issues", 245),
            ("Material Overheating", 212),
            ("Temperature Control", 189),
            ("Thermal Expansion", 167),
            ("Ambient Conditions", 134),
            ("Equipment Aging", 121),
        ),
    },
    "device-005": {
        "vibration": _dataset(
            ("Assembly Line Stoppages", 324),
            ("Component Misalignment", 298),
            ("Fastening Issues", 276),
            ("Tool Wear", 154),
            ("Quality Rejections", 142),
            ("Material Shortages", 128),
            ("Operator Training", 115),
        ),
        "pressure": _dataset(
            ("Pneumatic System Failures", 256),
            ("Air Pressure Drops", 223),
            ("Actuator Problems", 189),
            ("Valve Malfunctions", 167),
            ("Leak Detection", 145),
            ("Compressor Issues", 123),
            ("Filter Blockages", 112),
        ),
    },
    "cluster-west": {
        "cpu-usage": _dataset(
            ("Resource Intensive Tasks", 456),
            ("Memory Leaks", 398),
            ("Background Processes", 367),
            ("Network Bottlenecks", 334),
            ("Database Queries", 298),
            ("System Updates", 267),
            ("Hardware Limitations", 234),
        ),
        "memory-usage": _dataset(
            ("Memory Leaks", 434),
            ("Large Dataset Processing", 389),
            ("Cache Overflow", 345),
            ("Application Bloat", 312),
            ("Inefficient Algorithms", 278),
            ("System Fragmentation", 245),
            ("Hardware Constraints", 223),
        ),
        "network-latency": _dataset(
            ("Network Congestion", 498),
            ("Bandwidth Limitations", 434),
            ("Routing Issues", 378),
            ("Hardware Failures", 334),
            ("Configuration Errors", 289),
            ("External Dependencies", 256),
            ("Security Scanning", 228),
        ),
    },
    "cluster-east": {
        "cpu-usage": _dataset(
            ("High Load Applications", 387),
            ("Concurrent Processing", 345),
            ("Resource Contention", 312),
            ("Inefficient Code", 289),
            ("System Overhead", 267),
            ("Background Tasks", 234),
            ("Hardware Aging", 218),
        ),
        "disk-io": _dataset(
            ("Disk I/O Bottlenecks", 423),
            ("Storage Fragmentation", 378),
            ("File System Issues", 334),
            ("Database Operations", 298),
            ("Backup Processes", 267),
            ("Log File Growth", 245),
            ("Hardware Failures", 223),
        ),
    },
    "compute-node-1": {
        "performance-metrics": _dataset(
            ("High Latency Operations", 545),
            ("Resource Contention", 467),
            ("I/O Bottlenecks", 398),
            ("Network Congestion", 356),
            ("Memory Allocation", 323),
            ("CPU Throttling", 289),
            ("Storage Issues", 245),
        ),
        "error-logs": _dataset(
            ("Connection Timeouts", 487),
            ("Authentication Failures", 434),
            ("Resource Not Found", 389),
            ("Permission Denied", 345),
            ("Service Unavailable", 312),
            ("Data Validation Errors", 278),
            ("System Exceptions", 234),
        ),
        "memory-usage": _dataset(
            ("Memory Exhaustion", 398),
            ("Garbage Collection", 356),
            ("Memory Fragmentation", 323),
            ("Buffer Overflows", 289),
            ("Heap Allocation", 267),
            ("Stack Overflow", 234),
            ("Memory Leaks", 223),
        ),
    },
    "compute-node-2": {
        "cpu-usage": _dataset(
            ("Compute Intensive Tasks", 434),
            ("Parallel Processing", 389),
            ("Algorithm Complexity", 345),
            ("Resource Scheduling", 312),
            ("Context Switching", 278),
            ("Interrupt Handling", 245),
            ("System Calls", 223),
        ),
        "network-latency": _dataset(
            ("Inter-node Communication", 467),
            ("Data Transfer Delays", 398),
            ("Protocol Overhead", 356),
            ("Network Topology", 323),
            ("Bandwidth Saturation", 289),
            ("Packet Loss", 256),
            ("Routing Inefficiency", 228),
        ),
    },
    "edge-gateway-01": {
        "network-latency": _dataset(
            ("Edge Connectivity Issues", 278),
            ("Cellular Signal Strength", 234),
            ("Data Transmission Errors", 198),
            ("Protocol Handshakes", 176),
            ("Security Overhead", 154),
            ("Device Synchronization", 132),
            ("Firmware Updates", 118),
        ),
        "error-logs": _dataset(
            ("Connection Drops", 256),
            ("Authentication Timeouts", 223),
            ("Data Corruption", 189),
            ("Protocol Violations", 167),
            ("Buffer Overruns", 145),
            ("Sync Failures", 128),
            ("Hardware Resets", 115),
        ),
    },
}
