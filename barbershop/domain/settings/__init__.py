"""Settings domain - Key/value shop configuration"""
