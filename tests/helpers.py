def session(security=None, groups=None):
    """Settings fragment for the session component."""
    component = {}
    if security:
        component['security'] = security
    if groups is not None:
        component['allowedUserGroups'] = groups
    return {'session': component}
