"""KeyCrafter: typing-driven resource harvesting on an island grid."""
