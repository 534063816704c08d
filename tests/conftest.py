from hypothesis import settings

settings.register_profile("staticpoly", deadline=None, max_examples=75)
settings.load_profile("staticpoly")
