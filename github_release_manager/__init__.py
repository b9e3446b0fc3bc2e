"""Generate changelogs and publish GitHub releases from milestones."""
