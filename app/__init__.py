"""
JetHeroes -- PySide6 desktop hero browser.

Package layout:
    panels/     Hero list panel (search bar, grouped list)
    widgets/    Reusable custom widgets
    services/   Application services (event bus, hero search view model)
    theme/      Dark theme and custom stylesheets
"""
