"""
Pipeline stages for ReviewCraft.

Each stage is a small, stateless component used by the orchestrator:
- Input Validator
- Feature Categorizer
- Staff Recognition Processor
- Comment Sanitizer
- Narrative Composer
- Quality Evaluator
- Platform Optimizer
"""
