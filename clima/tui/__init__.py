"""Terminal user interface: screens, router and the Textual driver."""
