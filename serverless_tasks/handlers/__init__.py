"""
Lambda entry points.

Handler strings for the function configuration:
  serverless_tasks.handlers.image_labeler.lambda_handler
  serverless_tasks.handlers.stream_relay.lambda_handler
  serverless_tasks.handlers.object_metadata.lambda_handler
  serverless_tasks.handlers.workflow.greeting_handler
  serverless_tasks.handlers.workflow.salutations_handler
"""
