"""Roster sources."""

from orgstats.infrastructure.roster.loader import Roster, RosterLoader, sample_roster

__all__ = ["Roster", "RosterLoader", "sample_roster"]
