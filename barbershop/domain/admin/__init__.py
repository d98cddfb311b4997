"""Admin domain - Admin accounts and bearer-token login"""
