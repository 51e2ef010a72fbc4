"""
Utility modules for ReviewCraft.

Collaborators around the agent:
- Log collaborator: structured pipeline events to standard logging
- Monitoring: business event counts
- Export: batch CSV input and output
"""
