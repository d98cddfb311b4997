"""Bookings domain - Public booking form and admin booking management"""
