"""
Template cache services — the stages of one build pass.

    selector        pick matching files from the host collection
    normalizer      decode, escape and compute the cache URI
    assembler       render header, one body per template, footer
    module_wrapper  wrap the loader for a module system
    emitter         write the loader, drop consumed sources

Each stage is a plain function; ``core.engine.pipeline`` chains them.
"""
