"""
errorchain Basic Usage Example

This example demonstrates:
1. Wrapping errors with context and a call stack
2. Classifying failures with predefined errors
3. Walking the chain back to the root cause
4. Reporting to OpenTelemetry (when the otel extra is installed)

Usage:
  python examples/basic_usage.py
"""

import errorchain as errors


class UserNotFound(Exception):
    pass


def query_user(user_id):
    raise UserNotFound(f"no row for id={user_id}")


def load_user(user_id):
    try:
        return query_user(user_id)
    except UserNotFound as exc:
        raise errors.wrapf_with_custom_err(exc, errors.ERR_NOT_FOUND, "user %d missing", user_id)


def handle_request(user_id):
    try:
        return load_user(user_id)
    except errors.Error as exc:
        raise errors.wrap(exc, "GET /users/%d" % user_id)


def main():
    print("=" * 60)
    print("errorchain Basic Example")
    print("=" * 60)

    # ===== Example 1: Wrap and unwrap =====
    print("\n[Example 1] Wrap and unwrap")
    print("-" * 60)

    err = errors.new("db failure")
    wrapped = errors.wrap(err, "reading config")
    print(f"Message:  {wrapped}")
    print(f"Unwrap:   {errors.unwrap(wrapped)}")
    print(f"Wrap None: {errors.wrap(None, 'reading config')}")

    # ===== Example 2: Classification =====
    print("\n[Example 2] Predefined errors")
    print("-" * 60)

    try:
        handle_request(42)
    except errors.Error as exc:
        print(f"Message:     {exc}")
        print(f"Root cause:  {exc.root_cause_message()}")
        print(f"Not found?   {errors.is_(exc, errors.ERR_NOT_FOUND)}")
        print(f"HTTP status: {errors.http_status(exc)}")

        # ===== Example 3: Stacks =====
        print("\n[Example 3] Innermost call stack")
        print("-" * 60)
        original = errors.find_original_error_with_stack(exc)
        for frame in original.get_call_stack()[:3]:
            print(frame)

        # ===== Example 4: Tracing =====
        print("\n[Example 4] OpenTelemetry")
        print("-" * 60)
        try:
            from errorchain.infra.observability.otel import handle_error, try_create_tracer
        except ImportError:
            print("Install errorchain[otel] to report errors to spans")
            return

        tracer = try_create_tracer()
        if tracer is None:
            print("Set ERRORCHAIN_OTEL=1 or OTEL_EXPORTER_OTLP_ENDPOINT to enable tracing")
            return
        with tracer.start_as_current_span("GET /users/42", end_on_exit=False):
            handle_error(exc)
        print("Error reported to span")


if __name__ == "__main__":
    main()
