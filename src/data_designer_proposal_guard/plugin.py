from data_designer.plugins.plugin import Plugin, PluginType

proposal_guard_plugin = Plugin(
    config_qualified_name="data_designer_proposal_guard.config.ProposalGuardColumnConfig",
    impl_qualified_name="data_designer_proposal_guard.generator.ProposalGuardColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
