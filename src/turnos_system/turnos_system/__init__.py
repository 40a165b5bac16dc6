"""Turnos System package.

Feature modules (shifts, snapshots, personnel, locations, reports, audit)
each expose a model, a repository protocol with its MySQL implementation and
a service layer. Conflict detection and week math are pure functions.
"""
