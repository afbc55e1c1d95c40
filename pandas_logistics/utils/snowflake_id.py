import time
import threading
from typing import Optional


class SnowflakeIDGenerator:
    """
    Single-node snowflake ID generator

    Layout of the 64 bit id:
    - 1 sign bit (always 0)
    - 41 bits of milliseconds since ``epoch``
    - 10 bits of machine id
    - 12 bits of per-millisecond sequence

    Ids generated by one process are unique and increase with time, so
    ordering by id matches insertion order.
    """

    TIMESTAMP_BITS = 41
    MACHINE_ID_BITS = 10
    SEQUENCE_BITS = 12

    MAX_MACHINE_ID = (1 << MACHINE_ID_BITS) - 1
    MAX_SEQUENCE = (1 << SEQUENCE_BITS) - 1

    MACHINE_ID_SHIFT = SEQUENCE_BITS
    TIMESTAMP_SHIFT = SEQUENCE_BITS + MACHINE_ID_BITS

    # 2026-01-27 00:00:00 UTC
    DEFAULT_EPOCH = 1769472000000

    def __init__(self, machine_id: int = 0, epoch: int = DEFAULT_EPOCH):
        if machine_id < 0 or machine_id > self.MAX_MACHINE_ID:
            raise ValueError(f"machine_id must be between 0 and {self.MAX_MACHINE_ID}")

        self.machine_id = machine_id
        self.epoch = epoch
        self.sequence = 0
        self.last_timestamp = -1
        self._lock = threading.Lock()

    def _current_timestamp(self) -> int:
        return int(time.time() * 1000)

    def _wait_next_millis(self, last_timestamp: int) -> int:
        timestamp = self._current_timestamp()
        while timestamp <= last_timestamp:
            timestamp = self._current_timestamp()
        return timestamp

    def generate_id(self) -> int:
        """
        Generate the next id

        Raises:
            RuntimeError: the system clock moved backwards
        """
        with self._lock:
            timestamp = self._current_timestamp()

            if timestamp < self.last_timestamp:
                raise RuntimeError(
                    f"Clock moved backwards: {timestamp} < {self.last_timestamp}"
                )

            if timestamp == self.last_timestamp:
                self.sequence = (self.sequence + 1) & self.MAX_SEQUENCE
                # sequence exhausted for this millisecond
                if self.sequence == 0:
                    timestamp = self._wait_next_millis(self.last_timestamp)
            else:
                self.sequence = 0

            self.last_timestamp = timestamp

            return (
                ((timestamp - self.epoch) << self.TIMESTAMP_SHIFT) |
                (self.machine_id << self.MACHINE_ID_SHIFT) |
                self.sequence
            )

    def parse_id(self, snowflake_id: int) -> dict:
        """Split an id back into its timestamp, machine id and sequence."""
        return {
            "timestamp": (snowflake_id >> self.TIMESTAMP_SHIFT) + self.epoch,
            "machine_id": (snowflake_id >> self.MACHINE_ID_SHIFT) & self.MAX_MACHINE_ID,
            "sequence": snowflake_id & self.MAX_SEQUENCE,
        }


_snowflake_generator: Optional[SnowflakeIDGenerator] = None
_generator_lock = threading.Lock()


def get_snowflake_generator(machine_id: int = 0) -> SnowflakeIDGenerator:
    global _snowflake_generator

    if _snowflake_generator is None:
        with _generator_lock:
            if _snowflake_generator is None:
                _snowflake_generator = SnowflakeIDGenerator(machine_id=machine_id)

    return _snowflake_generator


def generate_snowflake_id() -> int:
    return get_snowflake_generator().generate_id()

