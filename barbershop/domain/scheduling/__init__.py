"""Scheduling domain - Daily slot schedule, availability and blocked times"""
