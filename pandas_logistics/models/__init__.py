from pandas_logistics.models.cargo import Cargo
from pandas_logistics.models.user import User, Agent, Importer, Supplier
from pandas_logistics.models.waitlist import WaitlistEntry

__all__ = ["Cargo", "User", "Agent", "Importer", "Supplier", "WaitlistEntry"]
