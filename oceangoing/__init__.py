"""Game logic for a pirate ship arcade game: upgrades, ship configurations,
level progression, save files, object and collision handling, ships, cannons,
cannon balls and drops."""

__version__ = "0.1.0"